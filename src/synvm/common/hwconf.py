MEMORY_SIZE = 0x8000        # Words of addressable memory
REGISTER_COUNT = 8
REGISTER_BASE = MEMORY_SIZE  # First register address
MAX_ADDRESS = REGISTER_BASE + REGISTER_COUNT - 1

WORD_MODULUS = 0x8000       # Arithmetic is 15-bit
WORD_MASK = WORD_MODULUS - 1
WORD_SIZE = 2               # Bytes per word in the program image
CHAR_MASK = 0xFF
