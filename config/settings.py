import os

API_HOST = os.getenv("LINE_PARSER_HOST", "127.0.0.1")
API_PORT = int(os.getenv("LINE_PARSER_PORT", "8000"))
LOG_LEVEL = os.getenv("LINE_PARSER_LOG_LEVEL", "INFO").upper()

# Comma-separated list, "*" allows any origin
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("LINE_PARSER_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
