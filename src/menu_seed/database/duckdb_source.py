import duckdb
from pathlib import Path
from menu_seed.config import Config

IN_MEMORY = ":memory:"


class DuckDBSource:
    """menus 테이블이 있는 DuckDB 연결 (in-memory 또는 파일)"""

    def __init__(self, config: Config):
        self.config = config

        # 파일 DB면 상위 디렉터리를 먼저 만든다
        if self.is_in_memory:
            target = IN_MEMORY
        else:
            db_path = Path(self.config.duckdb_path)
            db_path.parent.mkdir(parents=True, exist_ok=True)
            target = str(db_path)

        self.conn = duckdb.connect(target)

    @property
    def is_in_memory(self) -> bool:
        return self.config.duckdb_path == IN_MEMORY

    def disconnect(self):
        """Close the DuckDB connection"""
        if getattr(self, 'conn', None):
            self.conn.close()
        self.conn = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
        return False

    def __del__(self):
        self.disconnect()

    def ping(self):
        return self.conn.execute("SELECT 1").fetchall()

    @staticmethod
    def quote_identifier(name: str) -> str:
        """
        SQL 식별자를 큰따옴표로 감싼다

        'order' 같은 예약어도 테이블/인덱스 이름으로 쓸 수 있다.

        Example:
            >>> DuckDBSource.quote_identifier('order')
            '"order"'
        """
        return '"' + name.replace('"', '""') + '"'

    def scalar(self, query: str, params=None):
        """첫 행의 첫 컬럼 값 (행이 없으면 None)"""
        cursor = self.conn.execute(query, params) if params else self.conn.execute(query)
        result = cursor.fetchone()
        return result[0] if result else None

    def table_exists(self, table_name: str) -> bool:
        """Check if a table exists in the current database"""
        query = """
        SELECT COUNT(*)
        FROM information_schema.tables
        WHERE table_name = ?
        """
        return (self.scalar(query, (table_name,)) or 0) > 0

    def execute(self, query: str, params=None):
        if params:
            return self.conn.execute(query, params).fetchall()
        return self.conn.execute(query).fetchall()
