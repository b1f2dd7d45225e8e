import os
import pathlib

from dotenv import load_dotenv

load_dotenv()

user = os.getenv("DB_USER")
password = os.getenv("DB_PASSWORD")
host = os.getenv("DB_HOST")
port = os.getenv("DB_PORT")
db_name = os.getenv("DB_NAME")

sqlite_path = pathlib.Path(__file__).parents[1] / "rps_game.sqlite3"


def resolve_database_url() -> str:
    """Pick the database URL from the environment.

    DATABASE_URL wins, then the DB_* parts, then a local SQLite file.

    Returns:
        str: SQLAlchemy URL with an async driver
    """
    url = os.getenv("DATABASE_URL")
    if url:
        for prefix in ("postgres://", "postgresql://"):
            if url.startswith(prefix):
                return "postgresql+asyncpg://" + url[len(prefix):]
        return url
    if all((user, password, host, port, db_name)):
        return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{db_name}"
    return f"sqlite+aiosqlite:///{sqlite_path}"


database_url = resolve_database_url()
allowed_origins = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
server_host = os.getenv("HOST", "0.0.0.0")
server_port = int(os.getenv("PORT", "8080"))

if __name__ == "__main__":
    print(database_url, allowed_origins, log_level, server_host, server_port)
