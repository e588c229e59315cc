#!/usr/bin/env python3
"""
Seed a local SQLite database with demo data for DB Explorer development.
Usage (from the repository root):
    python scripts/seed_demo_db.py
    DATABASE_URL=sqlite:///scripts/demo.db python backend/main.py
Creates: scripts/demo.db
"""
import random
import sqlite3
from datetime import datetime, timedelta
from pathlib import Path

DB_PATH = Path(__file__).parent / "demo.db"

DDL = [
    """
    CREATE TABLE IF NOT EXISTS items (
        id          INTEGER PRIMARY KEY AUTOINCREMENT,
        title       VARCHAR(255) NOT NULL,
        description TEXT NOT NULL,
        updated     TEXT NULL
    )""",
    """
    CREATE TABLE IF NOT EXISTS users (
        user_id     INTEGER PRIMARY KEY AUTOINCREMENT,
        login       VARCHAR(255) UNIQUE NOT NULL,
        password    VARCHAR(255) NOT NULL,
        email       VARCHAR(255) NOT NULL,
        info        TEXT NOT NULL,
        updated     VARCHAR(255) NULL,
        created_at  TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )""",
    """
    CREATE TABLE IF NOT EXISTS products (
        id          INTEGER PRIMARY KEY AUTOINCREMENT,
        sku         VARCHAR(32) UNIQUE NOT NULL,
        name        TEXT NOT NULL,
        category    TEXT,
        price       REAL NOT NULL DEFAULT 0,
        stock_qty   INTEGER NOT NULL DEFAULT 0
    )""",
]

CATEGORIES = ['Electronics', 'Clothing', 'Books', 'Home & Garden', 'Sports']


def seed():
    conn = sqlite3.connect(DB_PATH)
    cur  = conn.cursor()

    for stmt in DDL:
        cur.execute(stmt)

    cur.executemany("INSERT INTO items(title, description, updated) VALUES (?,?,?)", [
        ("database/sql", "Talk about databases", "rvasily"),
        ("memcache", "Talk about memcache with a usage example", None),
    ])

    # users (20)
    for i in range(1, 21):
        cur.execute("INSERT OR IGNORE INTO users(login,password,email,info,created_at) VALUES (?,?,?,?,?)",
                    (f"user{i}", "secret", f"user{i}@example.com", "",
                     datetime.now() - timedelta(days=random.randint(10, 730))))

    # products (40)
    for i in range(1, 41):
        cur.execute("INSERT OR IGNORE INTO products(sku,name,category,price,stock_qty) VALUES (?,?,?,?,?)",
                    (f"SKU-{i:04d}", f"Product {i}", random.choice(CATEGORIES),
                     round(random.uniform(5, 500), 2), random.randint(0, 1000)))

    conn.commit()
    conn.close()
    print(f"Demo database seeded: {DB_PATH}")
    print("   Tables: items, users, products")


if __name__ == "__main__":
    seed()
