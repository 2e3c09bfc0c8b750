import logging
import os
import sqlite3

from utils.constants import DB_FILE, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


class DatabaseManager:
    def __init__(self, db_path: str | None = None):
        self.db_path = db_path or DB_FILE
        self._conn: sqlite3.Connection | None = None

    def get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA journal_mode = WAL")
        return self._conn

    def initialize(self):
        """Create schema and seed defaults."""
        conn = self.get_connection()
        self._create_schema(conn)
        self._seed_defaults(conn)
        conn.commit()
        logger.debug("Database ready at %s", self.db_path)

    def _create_schema(self, conn: sqlite3.Connection):
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS transactions (
                id           INTEGER PRIMARY KEY AUTOINCREMENT,
                kind         TEXT NOT NULL CHECK(kind IN ('income','expense')),
                amount       REAL NOT NULL CHECK(amount >= 0),
                category     TEXT,
                note         TEXT,
                occurred_at  TEXT NOT NULL,
                created_at   TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%f', 'now'))
            );

            CREATE INDEX IF NOT EXISTS idx_transactions_occurred_at ON transactions(occurred_at);
            CREATE INDEX IF NOT EXISTS idx_transactions_kind        ON transactions(kind);

            CREATE TABLE IF NOT EXISTS app_settings (
                key   TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );
        """)

    def _seed_defaults(self, conn: sqlite3.Connection):
        for key, value in DEFAULT_SETTINGS:
            conn.execute(
                "INSERT OR IGNORE INTO app_settings(key, value) VALUES (?, ?)",
                (key, value),
            )

    def table_columns(self, table: str) -> list[str]:
        """Column names of `table`, or [] when it does not exist."""
        conn = self.get_connection()
        rows = conn.execute(
            "SELECT name FROM pragma_table_info(?)", (table,)
        ).fetchall()
        return [r["name"] for r in rows]

    def get_setting(self, key: str, default: str = "") -> str:
        conn = self.get_connection()
        row = conn.execute(
            "SELECT value FROM app_settings WHERE key = ?", (key,)
        ).fetchone()
        return row["value"] if row else default

    def set_setting(self, key: str, value: str):
        conn = self.get_connection()
        conn.execute(
            "INSERT OR REPLACE INTO app_settings(key, value) VALUES (?, ?)",
            (key, value),
        )
        conn.commit()

    @staticmethod
    def open(db_folder: str | None = None) -> "DatabaseManager":
        """Startup factory: opens (creating if needed) porket.db.

        db_folder: if provided, the DB file is stored in that directory instead of CWD.
        """
        if db_folder:
            os.makedirs(db_folder, exist_ok=True)
            path = os.path.join(db_folder, DB_FILE)
        else:
            path = DB_FILE
        db = DatabaseManager(path)
        db.initialize()
        return db

    def close(self):
        if self._conn:
            self._conn.close()
            self._conn = None
