"""
Menu Seed - Main Entry Point

masters 메뉴를 menus 테이블에 반영하고 검증 결과를 출력합니다.
설정/연결/테이블 생성 실패는 치명적 오류로 종료 코드 1을 반환하고,
레코드 단위 오류는 경고로 보고한 뒤 정상 종료합니다.
"""

import sys
from typing import Optional

from menu_seed.config import Config, load_config
from menu_seed.database.duckdb_source import DuckDBSource
from menu_seed.log.logger import setup_logger, setup_seed_logger
from menu_seed.menu.models import MenuSeedSet, SeedSummary
from menu_seed.menu.report import format_report
from menu_seed.menu.repository import MenuRepository
from menu_seed.menu.seed_data import MASTERS_MENUS
from menu_seed.menu.seeder import MenuSeeder


def seed_menus(config: Config, seed_set: MenuSeedSet = MASTERS_MENUS, logger=None) -> SeedSummary:
    """
    DuckDB에 연결하고 시드 정의를 반영

    Args:
        config: 애플리케이션 설정
        seed_set: 반영할 시드 정의
        logger: 진행 상황을 기록할 로거

    Returns:
        SeedSummary

    Raises:
        연결 실패나 테이블 생성 실패 시 원래 예외를 그대로 전달
    """
    logger = logger or setup_seed_logger(config)

    with DuckDBSource(config) as source:
        source.ping()
        logger.info(f"Connected to DuckDB: {config.duckdb_path}")

        repository = MenuRepository(duckdb_source=source, table_name=config.menu_table, logger=logger)
        seeder = MenuSeeder(repository, seed_set, logger=logger)
        return seeder.run()


def main(config: Optional[Config] = None) -> int:
    """메인 진입점"""
    if config is None:
        try:
            config = load_config()
        except ValueError as e:
            logger = setup_logger('MenuSeedMain')
            logger.error(f"❌ Error loading configuration: {e}")
            return 1

    logger = setup_seed_logger(config)

    try:
        summary = seed_menus(config, logger=logger)
    except Exception as e:
        logger.error(f"❌ Menu seeding aborted: {e}")
        return 1

    for line in format_report(summary):
        logger.info(line)

    logger.info(f"✅ {summary.menu_type.capitalize()} menus setup completed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
