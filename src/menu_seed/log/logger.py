import logging
import sys
from pathlib import Path


def setup_logger(name: str, log_file: str = "menu_seed.log", level=logging.INFO):
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove old handlers first to prevent accumulation
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # 콘솔 출력
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 파일 출력 (로그 디렉터리가 없으면 생성)
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)
    logger.addHandler(file_handler)

    return logger


def cleanup_logger(logger):
    """Close all handlers and remove them"""
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)


def setup_seed_logger(config, name: str = "MenuSeedMain"):
    """
    Config의 로그 파일/레벨로 시드 실행용 로거 생성

    Args:
        config: 애플리케이션 설정 (log_file, log_level 사용)
        name: 로거 이름

    Returns:
        logging.Logger
    """
    return setup_logger(name, config.log_file, config.log_level_value)
