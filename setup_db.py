"""
Database setup script.
Run this before starting the application for the first time.

For a PostgreSQL DATABASE_URL the role and database are created with psql
(needs a local `postgres` superuser); the tables are then created through
SQLAlchemy for any backend.
"""
import subprocess
import sys
from urllib.parse import urlparse

from dotenv import load_dotenv

load_dotenv()

from SmartRecipe.database import DATABASE_URL, init_db  # noqa: E402


def create_postgres_database(url: str):
    """Create the PostgreSQL role and database named in the URL."""
    parsed = urlparse(url)
    db_user = parsed.username
    db_password = parsed.password
    db_name = parsed.path.lstrip("/")

    print("\n1. Checking PostgreSQL installation...")
    try:
        result = subprocess.run(['psql', '--version'], capture_output=True, text=True)
        print(f"   ✓ {result.stdout.strip()}")
    except FileNotFoundError:
        print("   ✗ PostgreSQL not found. Please install PostgreSQL first.")
        sys.exit(1)

    print("\n2. Creating database user...")
    subprocess.run([
        'psql', '-U', 'postgres', '-c',
        f"CREATE USER {db_user} WITH PASSWORD '{db_password}';"
    ], check=False, capture_output=True)
    print(f"   ✓ User '{db_user}' created (or already exists)")

    print("\n3. Creating database...")
    subprocess.run([
        'psql', '-U', 'postgres', '-c',
        f"CREATE DATABASE {db_name} OWNER {db_user};"
    ], check=False, capture_output=True)
    print(f"   ✓ Database '{db_name}' created (or already exists)")


def setup_database():
    print("🔧 Smart Recipe Database Setup")
    print("=" * 50)

    if DATABASE_URL.startswith("postgresql"):
        create_postgres_database(DATABASE_URL)

    print("\nCreating tables...")
    init_db()
    print("   ✓ Tables created successfully")

    print("\n" + "=" * 50)
    print("✓ Setup complete!")
    print("\nYou can now run: python -m uvicorn api:app --reload")


if __name__ == "__main__":
    setup_database()
