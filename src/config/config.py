import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_SECTIONS = [
    ("Naturaleza", "Fotos de paisajes naturales, plantas y animales"),
    ("Urbano", "Fotos de ciudades, edificios y vida urbana"),
    ("Retratos", "Fotos de personas y retratos"),
    ("Arte", "Fotos artísticas y creativas"),
    ("Viajes", "Fotos de viajes y lugares turísticos"),
]


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
    JWT_SECRET = os.getenv("JWT_SECRET", "supersecreto")
    JWT_EXPIRES_HOURS = int(os.getenv("JWT_EXPIRES_HOURS", "0"))
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///galeria.sqlite")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
    MAX_UPLOAD_FILES = int(os.getenv("MAX_UPLOAD_FILES", "50"))
    SECTION_PASSWORD = os.getenv("SECTION_PASSWORD", "Aguadelimon1")
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "https://galeria-cyan.vercel.app,http://localhost:3000,http://localhost:3001").split(",")
        if origin.strip()
    ]
    LOG_FILE = os.getenv("LOG_FILE")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PORT = int(os.getenv("PORT", "4001"))
