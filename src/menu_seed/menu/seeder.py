"""
메뉴 시더

시드 정의를 menus 테이블에 반영합니다.

1. upsert 단계: slug 기준으로 없으면 생성, 있으면 표시 정보 갱신
2. 연결 단계: 하위 메뉴의 parent_id를 최상위 메뉴 ID로 설정
3. 검증 단계: 활성 메뉴 수와 누락된 slug 확인

연결은 ID가 모두 확정된 뒤에만 가능하므로 upsert와 연결을 분리된 단계로 실행합니다.
레코드 단위 실패는 결과에 기록하고 다음 레코드를 계속 처리합니다.
"""

from datetime import datetime
from typing import Callable, List

from menu_seed.log.logger import setup_logger
from menu_seed.menu.models import (
    LinkResult,
    MenuSeed,
    MenuSeedSet,
    RecordResult,
    SeedSummary,
    UpsertOutcome,
    VerificationResult,
)
from menu_seed.menu.repository import MenuRepository


class MenuSeeder:
    """
    메뉴 시더

    MenuSeedSet 하나를 해당 menu_type 파티션에 반영합니다.
    """

    def __init__(self, repository: MenuRepository, seed_set: MenuSeedSet,
                 clock: Callable[[], datetime] = datetime.now, logger=None):
        """
        Args:
            repository: 메뉴 저장소
            seed_set: 반영할 시드 정의
            clock: 현재 시각 함수 (created_at/updated_at 기록용)
            logger: 사용할 로거 (없으면 새로 생성)
        """
        self.repository = repository
        self.seed_set = seed_set
        self.clock = clock
        self.logger = logger or setup_logger('MenuSeeder')

    @property
    def menu_type(self) -> str:
        return self.seed_set.menu_type

    def run(self) -> SeedSummary:
        """upsert → 연결 → 검증 순서로 전체 시드 실행"""
        results = self.upsert_all()
        link = self.link_children()
        verification = self.verify()

        return SeedSummary(
            menu_type=self.menu_type,
            results=results,
            link=link,
            verification=verification
        )

    def upsert_all(self) -> List[RecordResult]:
        """시드 목록 순서대로 upsert"""
        self.logger.info(f"Inserting/Updating {self.menu_type} menus...")
        return [self.upsert(entry) for entry in self.seed_set.entries]

    def upsert(self, entry: MenuSeed) -> RecordResult:
        """
        시드 한 건 upsert

        Args:
            entry: 반영할 시드

        Returns:
            RecordResult (실패해도 예외를 던지지 않음)
        """
        try:
            now = self.clock()
            existing = self.repository.get_by_slug(entry.slug, self.menu_type)

            if existing is None:
                self.repository.create(entry.to_menu(self.menu_type, now))
                self.logger.info(f"Inserted menu: {entry.name}")
                return RecordResult(entry.slug, entry.name, UpsertOutcome.INSERTED)

            existing.name = entry.name
            existing.icon = entry.icon
            existing.route = entry.route
            existing.order = entry.order
            existing.is_active = entry.is_active
            existing.updated_at = now
            self.repository.update_content(existing)
            self.logger.info(f"Updated menu: {entry.name}")
            return RecordResult(entry.slug, entry.name, UpsertOutcome.UPDATED)

        except Exception as e:
            self.logger.error(f"Error processing menu '{entry.name}': {e}")
            return RecordResult(entry.slug, entry.name, UpsertOutcome.FAILED, reason=str(e))

    def link_children(self) -> LinkResult:
        """하위 메뉴들의 parent_id를 최상위 메뉴 ID로 설정"""
        self.logger.info("Setting up parent-child relationships...")
        result = LinkResult()

        try:
            root = self.repository.get_by_slug(self.seed_set.root_slug, self.menu_type)
        except Exception as e:
            self.logger.warning(f"Failed to look up root menu '{self.seed_set.root_slug}': {e}")
            result.root_error = str(e)
            return result

        if root is None:
            self.logger.warning(
                f"Root menu '{self.seed_set.root_slug}' not found in '{self.menu_type}', skipping links"
            )
            return result

        result.root_id = root.id

        for slug in self.seed_set.child_slugs:
            try:
                child = self.repository.get_by_slug(slug, self.menu_type)
                if child is None:
                    result.failures[slug] = "menu not found"
                    self.logger.warning(f"Error updating parent_id for {slug}: menu not found")
                    continue

                if child.parent_id == root.id:
                    result.unchanged.append(slug)
                    continue

                self.repository.set_parent(child.id, root.id)
                result.linked.append(slug)

            except Exception as e:
                result.failures[slug] = str(e)
                self.logger.warning(f"Error updating parent_id for {slug}: {e}")

        self.logger.info(
            f"Parent-child relationships updated "
            f"(linked={len(result.linked)}, unchanged={len(result.unchanged)}, failed={len(result.failures)})"
        )
        return result

    def verify(self) -> VerificationResult:
        """활성 메뉴 수를 기대값과 비교하고 목록을 수집"""
        active_count = self.repository.count(self.menu_type)
        expected_count = self.seed_set.expected_count

        missing_slugs = []
        if active_count < expected_count:
            self.logger.warning(
                f"Expected {expected_count} {self.menu_type} menus, found {active_count}"
            )
            missing_slugs = [
                slug for slug in self.seed_set.expected_slugs
                if not self.repository.exists_active(slug, self.menu_type)
            ]

        return VerificationResult(
            active_count=active_count,
            expected_count=expected_count,
            missing_slugs=missing_slugs,
            active_menus=self.repository.get_by_menu_type(self.menu_type),
            total_count=self.repository.count(self.menu_type, include_inactive=True)
        )
