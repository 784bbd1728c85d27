import logging
import os
import re
from dataclasses import dataclass
from dotenv import load_dotenv

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass
class Config:
    duckdb_path: str

    # 메뉴 테이블 설정
    menu_table: str = "menus"

    # Logging
    log_file: str = "menu_seed.log"
    log_level: str = "INFO"

    @property
    def log_level_value(self) -> int:
        """로그 레벨 이름을 logging 모듈 상수로 변환"""
        return logging.getLevelName(self.log_level.upper())


def load_config(load_dotenv_file: bool = True) -> Config:
    if load_dotenv_file:
        load_dotenv()

    # 필수 변수
    required_vars = ["DUCKDB_PATH"]

    missing = [var for var in required_vars if not os.getenv(var)]
    if missing:
        raise ValueError(f"Missing required configuration: {missing[0]}")

    # 테이블명은 SQL 문에 그대로 들어가므로 식별자 형식만 허용
    menu_table = os.getenv("MENU_TABLE", "menus")
    if not _IDENTIFIER_PATTERN.match(menu_table):
        raise ValueError(f"MENU_TABLE must be a plain SQL identifier: {menu_table}")

    log_level = os.getenv("MENU_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"MENU_LOG_LEVEL must be a valid logging level: {log_level}")

    return Config(
        duckdb_path=os.getenv("DUCKDB_PATH"),
        menu_table=menu_table,
        log_file=os.getenv("MENU_LOG_FILE", "menu_seed.log"),
        log_level=log_level,
    )
