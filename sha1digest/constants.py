BLOCK_SIZE = 64
DIGEST_SIZE = 20

WORD_MASK = 0xFFFFFFFF
LENGTH_MASK = (1 << 64) - 1

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

K0 = 0x5A827999
K1 = 0x6ED9EBA1
K2 = 0x8F1BBCDC
K3 = 0xCA62C1D6

State = tuple[int, int, int, int, int]
