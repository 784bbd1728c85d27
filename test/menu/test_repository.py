from datetime import datetime
from unittest.mock import MagicMock

import pytest

from menu_seed.config import Config
from menu_seed.database.duckdb_source import DuckDBSource
from menu_seed.log.logger import cleanup_logger, setup_logger
from menu_seed.menu.models import Menu
from menu_seed.menu.repository import MenuRepository


@pytest.fixture
def logger(tmp_path):
    test_logger = setup_logger("test_menu_repository", str(tmp_path / "repo.log"))
    yield test_logger
    cleanup_logger(test_logger)


@pytest.fixture
def duckdb_source():
    source = DuckDBSource(Config(duckdb_path=":memory:"))
    yield source
    source.disconnect()


@pytest.fixture
def repo(duckdb_source, logger):
    return MenuRepository(duckdb_source=duckdb_source, logger=logger)


def _menu(slug, name="Menu", order=0, menu_type="masters", is_active=True):
    now = datetime(2024, 1, 1, 12, 0, 0)
    return Menu(name=name, slug=slug, icon="flag", route=f"/{slug}", order=order,
                is_active=is_active, menu_type=menu_type, created_at=now, updated_at=now)


def test_300_table_created(duckdb_source, repo):
    """TEST-300: menus 테이블과 컬럼 생성 확인"""
    assert duckdb_source.table_exists("menus")

    columns = {
        row[0]: row[1] for row in duckdb_source.execute(
            "SELECT column_name, data_type FROM information_schema.columns WHERE table_name = 'menus'"
        )
    }
    assert columns['id'] == 'UBIGINT'
    assert columns['parent_id'] == 'UBIGINT'
    assert columns['order'] == 'INTEGER'
    assert columns['is_active'] == 'BOOLEAN'
    assert set(columns) == {
        'id', 'name', 'slug', 'icon', 'route', 'parent_id', 'order',
        'is_active', 'menu_type', 'created_at', 'updated_at',
    }


def test_301_column_defaults(duckdb_source, repo):
    """TEST-301: order/is_active/menu_type 기본값"""
    duckdb_source.execute("INSERT INTO menus (name, slug) VALUES ('Home', 'home')")

    menu = repo.get_by_slug("home", "main")

    assert menu is not None
    assert menu.order == 0
    assert menu.is_active is True
    assert menu.menu_type == "main"
    assert menu.parent_id is None


def test_302_existing_table_reused(duckdb_source, logger):
    """TEST-302: 이미 존재하는 테이블은 다시 만들지 않음"""
    first = MenuRepository(duckdb_source=duckdb_source, logger=logger)
    first.create(_menu("masters"))

    second = MenuRepository(duckdb_source=duckdb_source, logger=logger)

    assert second.get_by_slug("masters", "masters") is not None


def test_303_create_assigns_sequential_ids(repo):
    """TEST-303: 생성 시 ID 자동 부여"""
    first = repo.create(_menu("masters"))
    second = repo.create(_menu("masters.users"))

    assert first.id is not None
    assert second.id > first.id
    assert repo.get_by_id(second.id).slug == "masters.users"


def test_304_slug_lookup_is_partitioned(repo):
    """TEST-304: 같은 slug라도 menu_type이 다르면 별도 레코드"""
    repo.create(_menu("settings", name="Main Settings", menu_type="main"))
    repo.create(_menu("settings", name="Masters Settings", menu_type="masters"))

    assert repo.get_by_slug("settings", "main").name == "Main Settings"
    assert repo.get_by_slug("settings", "masters").name == "Masters Settings"
    assert repo.get_by_slug("settings", "reports") is None


def test_305_update_content_keeps_parent_and_created_at(repo):
    """TEST-305: update_content는 parent_id/created_at을 건드리지 않음"""
    root = repo.create(_menu("masters"))
    child = repo.create(_menu("masters.users", name="Old"))
    repo.set_parent(child.id, root.id)

    stored = repo.get_by_slug("masters.users", "masters")
    stored.name = "Users"
    stored.order = 5
    stored.is_active = False
    stored.parent_id = None
    stored.created_at = datetime(2030, 1, 1)
    stored.updated_at = datetime(2024, 6, 1, 8, 0, 0)
    repo.update_content(stored)

    reloaded = repo.get_by_id(child.id)
    assert reloaded.name == "Users"
    assert reloaded.order == 5
    assert reloaded.is_active is False
    assert reloaded.parent_id == root.id
    assert reloaded.created_at == datetime(2024, 1, 1, 12, 0, 0)
    assert reloaded.updated_at == datetime(2024, 6, 1, 8, 0, 0)


def test_306_update_requires_id(repo):
    """TEST-306: ID 없는 메뉴 업데이트는 ValueError"""
    with pytest.raises(ValueError, match="must have an ID"):
        repo.update_content(_menu("masters"))


def test_307_counts_and_listing(repo):
    """TEST-307: 활성 메뉴 수와 order 순 목록"""
    repo.create(_menu("b", name="B", order=2))
    repo.create(_menu("a", name="A", order=1))
    repo.create(_menu("hidden", name="Hidden", order=0, is_active=False))
    repo.create(_menu("other", name="Other", order=0, menu_type="main"))

    assert repo.count("masters") == 2
    assert repo.count("masters", include_inactive=True) == 3
    assert [m.slug for m in repo.get_by_menu_type("masters")] == ["a", "b"]
    assert [m.slug for m in repo.get_by_menu_type("masters", include_inactive=True)] == ["hidden", "a", "b"]


def test_308_exists_active(repo):
    """TEST-308: 활성 메뉴 존재 여부"""
    repo.create(_menu("masters"))
    repo.create(_menu("masters.status", is_active=False))

    assert repo.exists_active("masters", "masters")
    assert not repo.exists_active("masters.status", "masters")
    assert not repo.exists_active("masters", "main")


def test_309_custom_table_name(duckdb_source, logger):
    """TEST-309: table_name으로 테이블명 지정"""
    repo = MenuRepository(duckdb_source=duckdb_source, table_name="admin_menus", logger=logger)
    repo.create(_menu("masters"))

    assert duckdb_source.table_exists("admin_menus")
    assert not duckdb_source.table_exists("menus")
    assert repo.sequence_name == "admin_menus_id_seq"


def test_310_reserved_word_table_name(duckdb_source, logger):
    """TEST-310: 예약어 테이블명 (order)도 생성/조회/수정 가능"""
    repo = MenuRepository(duckdb_source=duckdb_source, table_name="order", logger=logger)

    root = repo.create(_menu("masters"))
    child = repo.create(_menu("masters.users", name="Old"))
    repo.set_parent(child.id, root.id)

    stored = repo.get_by_slug("masters.users", "masters")
    stored.name = "Users"
    repo.update_content(stored)

    assert duckdb_source.table_exists("order")
    assert repo.get_by_id(child.id).name == "Users"
    assert repo.get_by_id(child.id).parent_id == root.id
    assert repo.count("masters") == 2
    assert repo.exists_active("masters", "masters")
    assert [m.slug for m in repo.get_by_menu_type("masters")] == ["masters", "masters.users"]


def test_311_schema_creation_failure_raises(logger):
    """TEST-311: 테이블 생성 실패는 예외로 전달"""
    source = MagicMock()
    source.table_exists.return_value = False
    source.conn.execute.side_effect = RuntimeError("disk full")

    with pytest.raises(RuntimeError, match="disk full"):
        MenuRepository(duckdb_source=source, logger=logger)


def test_312_schema_not_confirmed_raises(logger):
    """TEST-312: 생성 후에도 테이블이 확인되지 않으면 RuntimeError"""
    source = MagicMock()
    source.table_exists.return_value = False

    with pytest.raises(RuntimeError, match="still missing"):
        MenuRepository(duckdb_source=source, logger=logger)
