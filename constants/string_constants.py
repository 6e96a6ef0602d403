START_MESSAGE = "Iniciando multiplicación de matrices de {size}x{size}"
GENERATING_MESSAGE = "Generando matrices..."
SEQUENTIAL_MESSAGE = "\nEjecutando versión secuencial..."
SEQUENTIAL_TIME_MESSAGE = "Tiempo secuencial: {elapsed:.4f} segundos"
PARALLEL_MESSAGE = "\nEjecutando versión paralela..."
PARALLEL_TIME_MESSAGE = "Tiempo paralelo:   {elapsed:.4f} segundos"
MATCH_MESSAGE = "\nResultados coinciden."
MISMATCH_MESSAGE = "\nADVERTENCIA: Los resultados no coinciden."
MATRIX_TOO_LARGE_MESSAGE = "La matriz es demasiado grande para imprimirla."
