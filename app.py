import uvicorn

from config.settings import API_HOST, API_PORT, LOG_LEVEL

if __name__ == "__main__":
    uvicorn.run("api.main:app", host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())
