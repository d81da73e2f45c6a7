__title__ = "caesar-cipher-api"
__version__ = "1.0.0"
__description__ = "Caesar cipher HTTP API with brute-force and frequency-based auto-decryption"
