from connect_db import create_db_engine, init_db
from core.config import settings

if __name__ == "__main__":
    print(f"Creating database tables in {settings.DATABASE_URL}...")
    try:
        init_db(create_db_engine())
        print("✅ Tables created successfully!")
    except Exception as e:
        print(f"❌ Error: {e}")
