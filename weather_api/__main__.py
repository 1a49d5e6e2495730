"""Run the server: python -m weather_api"""
import uvicorn

from weather_api.config import settings


def main():
    uvicorn.run("weather_api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
