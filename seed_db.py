#!/usr/bin/env python3
"""
Script to create the tables and load demo data into an empty database
"""

from petphoto.database import Base, SessionLocal, engine
from petphoto.seed import seed_database


def main():
    print("🔍 Creating tables if needed...")
    Base.metadata.create_all(bind=engine, checkfirst=True)

    db = SessionLocal()
    try:
        if seed_database(db):
            print("✅ Demo data inserted")
        else:
            print("ℹ️  Database already contains data, nothing to do")
    except Exception as e:
        db.rollback()
        print(f"❌ Seeding failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
