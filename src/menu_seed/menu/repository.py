"""
메뉴 저장소

DuckDB의 menus 테이블을 생성하고 조회/수정하는 레포지토리입니다.
"""

from typing import List, Optional

from menu_seed.database.duckdb_source import DuckDBSource
from menu_seed.log.logger import setup_logger
from menu_seed.menu.models import Menu

_SELECT_COLUMNS = (
    'id, name, slug, icon, route, parent_id, "order", is_active, menu_type, created_at, updated_at'
)


class MenuRepository:
    """
    메뉴 저장소

    slug는 menu_type 파티션 안에서만 유일하므로 모든 조회는 (slug, menu_type) 쌍으로 합니다.
    """

    TABLE_NAME = 'menus'

    def __init__(self, duckdb_source: DuckDBSource, table_name: str = None, logger=None):
        """
        Args:
            duckdb_source: DuckDB 소스 객체 (연결 수명은 호출자가 관리)
            table_name: 메뉴 테이블명 (없으면 'menus')
            logger: 사용할 로거 (없으면 새로 생성)
        """
        self.logger = logger or setup_logger('MenuRepository')
        self.duckdb = duckdb_source
        self.table_name = table_name or self.TABLE_NAME

        self._ensure_table_exists()

    @property
    def quoted_table(self) -> str:
        return self.duckdb.quote_identifier(self.table_name)

    @property
    def sequence_name(self) -> str:
        return f"{self.table_name}_id_seq"

    def _index_name(self, column: str) -> str:
        return self.duckdb.quote_identifier(f"idx_{self.table_name}_{column}")

    def _ensure_table_exists(self):
        """menus 테이블이 없으면 생성하고, 생성 여부를 확인"""
        if self.duckdb.table_exists(self.table_name):
            self.logger.debug(f"Table {self.table_name} is ready")
            return

        self.logger.warning(f"Table '{self.table_name}' does not exist. Creating table...")

        statements = [
            f"CREATE SEQUENCE IF NOT EXISTS {self.duckdb.quote_identifier(self.sequence_name)} START 1",
            f"""
            CREATE TABLE IF NOT EXISTS {self.quoted_table} (
                id UBIGINT PRIMARY KEY DEFAULT nextval('{self.sequence_name}'),
                name VARCHAR(255) NOT NULL,
                slug VARCHAR(255) NOT NULL,
                icon VARCHAR(255),
                route VARCHAR(255),
                parent_id UBIGINT,
                "order" INTEGER DEFAULT 0,
                is_active BOOLEAN DEFAULT TRUE,
                menu_type VARCHAR(50) DEFAULT 'main',
                created_at TIMESTAMP,
                updated_at TIMESTAMP
            )
            """,
            f"CREATE INDEX IF NOT EXISTS {self._index_name('parent_id')} ON {self.quoted_table} (parent_id)",
            f"CREATE INDEX IF NOT EXISTS {self._index_name('menu_type')} ON {self.quoted_table} (menu_type)",
            f"CREATE INDEX IF NOT EXISTS {self._index_name('slug')} ON {self.quoted_table} (slug)",
        ]

        try:
            for statement in statements:
                self.duckdb.conn.execute(statement)
        except Exception as e:
            self.logger.error(f"Failed to create {self.table_name} table: {e}")
            raise

        if not self.duckdb.table_exists(self.table_name):
            raise RuntimeError(f"Table {self.table_name} still missing after CREATE TABLE")

        self.logger.info(f"Table '{self.table_name}' created successfully")

    def create(self, menu: Menu) -> Menu:
        """
        새 메뉴 생성

        Args:
            menu: 생성할 Menu 객체

        Returns:
            생성된 Menu 객체 (id 포함)
        """
        insert_sql = f"""
        INSERT INTO {self.quoted_table}
        (name, slug, icon, route, parent_id, "order", is_active, menu_type, created_at, updated_at)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        RETURNING id
        """

        params = (
            menu.name,
            menu.slug,
            menu.icon,
            menu.route,
            menu.parent_id,
            menu.order,
            menu.is_active,
            menu.menu_type,
            menu.created_at,
            menu.updated_at
        )

        try:
            result = self.duckdb.conn.execute(insert_sql, params).fetchone()
            menu.id = result[0]

            self.logger.debug(f"Created menu: {menu.name} ({menu.slug}) id={menu.id}")
            return menu

        except Exception as e:
            self.logger.error(f"Failed to create menu {menu.slug}: {e}")
            raise

    def get_by_id(self, menu_id: int) -> Optional[Menu]:
        """ID로 메뉴 조회"""
        select_sql = f"""
        SELECT {_SELECT_COLUMNS}
        FROM {self.quoted_table}
        WHERE id = ?
        """

        result = self.duckdb.conn.execute(select_sql, (menu_id,)).fetchone()
        if result:
            return self._row_to_menu(result)
        return None

    def get_by_slug(self, slug: str, menu_type: str) -> Optional[Menu]:
        """
        slug로 메뉴 조회

        Args:
            slug: 메뉴 slug
            menu_type: 메뉴 구분

        Returns:
            Menu 객체 또는 None
        """
        select_sql = f"""
        SELECT {_SELECT_COLUMNS}
        FROM {self.quoted_table}
        WHERE slug = ? AND menu_type = ?
        ORDER BY id ASC
        LIMIT 1
        """

        try:
            result = self.duckdb.conn.execute(select_sql, (slug, menu_type)).fetchone()
            if result:
                return self._row_to_menu(result)
            return None

        except Exception as e:
            self.logger.error(f"Failed to get menu by slug {slug}: {e}")
            raise

    def get_by_menu_type(self, menu_type: str, include_inactive: bool = False) -> List[Menu]:
        """
        파티션의 메뉴 목록 조회

        Args:
            menu_type: 메뉴 구분
            include_inactive: 비활성 메뉴 포함 여부

        Returns:
            Menu 리스트 (order 순으로 정렬)
        """
        where_clauses = ["menu_type = ?"]
        if not include_inactive:
            where_clauses.append("is_active = TRUE")

        where_clause = " AND ".join(where_clauses)

        select_sql = f"""
        SELECT {_SELECT_COLUMNS}
        FROM {self.quoted_table}
        WHERE {where_clause}
        ORDER BY "order" ASC, name ASC
        """

        try:
            results = self.duckdb.conn.execute(select_sql, (menu_type,)).fetchall()
            return [self._row_to_menu(row) for row in results]

        except Exception as e:
            self.logger.error(f"Failed to get menus for {menu_type}: {e}")
            raise

    def count(self, menu_type: str, include_inactive: bool = False) -> int:
        """파티션의 메뉴 수 조회"""
        where_clauses = ["menu_type = ?"]
        if not include_inactive:
            where_clauses.append("is_active = TRUE")

        count_sql = f"""
        SELECT COUNT(*)
        FROM {self.quoted_table}
        WHERE {' AND '.join(where_clauses)}
        """

        return self.duckdb.scalar(count_sql, (menu_type,)) or 0

    def exists_active(self, slug: str, menu_type: str) -> bool:
        """활성 상태의 메뉴가 존재하는지 확인"""
        exists_sql = f"""
        SELECT COUNT(*)
        FROM {self.quoted_table}
        WHERE slug = ? AND menu_type = ? AND is_active = TRUE
        """

        return (self.duckdb.scalar(exists_sql, (slug, menu_type)) or 0) > 0

    def update_content(self, menu: Menu) -> Menu:
        """
        메뉴 표시 정보 업데이트

        name, icon, route, order, is_active, updated_at만 덮어씁니다.
        parent_id, created_at, slug, menu_type은 변경하지 않습니다.

        Args:
            menu: 업데이트할 Menu 객체 (id 필수)

        Returns:
            업데이트된 Menu 객체
        """
        if not menu.id:
            raise ValueError("Menu must have an ID to update")

        update_sql = f"""
        UPDATE {self.quoted_table}
        SET name = ?,
            icon = ?,
            route = ?,
            "order" = ?,
            is_active = ?,
            updated_at = ?
        WHERE id = ?
        """

        params = (
            menu.name,
            menu.icon,
            menu.route,
            menu.order,
            menu.is_active,
            menu.updated_at,
            menu.id
        )

        try:
            self.duckdb.conn.execute(update_sql, params)
            self.logger.debug(f"Updated menu: {menu.name} ({menu.slug})")
            return menu

        except Exception as e:
            self.logger.error(f"Failed to update menu {menu.slug}: {e}")
            raise

    def set_parent(self, menu_id: int, parent_id: Optional[int]) -> None:
        """메뉴의 parent_id 설정"""
        update_sql = f"""
        UPDATE {self.quoted_table}
        SET parent_id = ?
        WHERE id = ?
        """

        try:
            self.duckdb.conn.execute(update_sql, (parent_id, menu_id))

        except Exception as e:
            self.logger.error(f"Failed to set parent of menu id {menu_id}: {e}")
            raise

    def _row_to_menu(self, row: tuple) -> Menu:
        """
        DB 행을 Menu 객체로 변환

        Args:
            row: _SELECT_COLUMNS 순서의 튜플

        Returns:
            Menu 객체
        """
        return Menu(
            id=row[0],
            name=row[1],
            slug=row[2],
            icon=row[3],
            route=row[4],
            parent_id=row[5],
            order=row[6] or 0,
            is_active=bool(row[7]),
            menu_type=row[8],
            created_at=row[9],
            updated_at=row[10]
        )
