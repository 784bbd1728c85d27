"""
메뉴 데이터 모델

계층형 네비게이션 메뉴 레코드와 시드 결과 모델입니다.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple


@dataclass
class Menu:
    """
    메뉴 데이터 클래스

    Attributes:
        id: 메뉴 고유 ID (자동 생성, 생성 후 변경 불가)
        name: 메뉴 표시 이름
        slug: 메뉴 식별자 (menu_type 안에서 유일)
        icon: 메뉴 아이콘 이름
        route: 메뉴 경로 (그룹 메뉴는 None)
        parent_id: 상위 메뉴 ID (None이면 최상위)
        order: 메뉴 정렬 순서
        is_active: 활성화 여부
        menu_type: 메뉴 구분 (예: 'masters')
        created_at: 생성 시각
        updated_at: 마지막 수정 시각
    """
    name: str
    slug: str
    icon: Optional[str] = None
    route: Optional[str] = None
    parent_id: Optional[int] = None
    order: int = 0
    is_active: bool = True
    menu_type: str = "main"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    id: Optional[int] = None

    def has_parent(self) -> bool:
        """상위 메뉴 존재 여부"""
        return self.parent_id is not None


@dataclass(frozen=True)
class MenuSeed:
    """
    시드할 메뉴 한 건의 정의

    id와 parent_id는 작성 시점에 알 수 없으므로 포함하지 않습니다.
    """
    name: str
    slug: str
    icon: Optional[str] = None
    route: Optional[str] = None
    order: int = 0
    is_active: bool = True

    def to_menu(self, menu_type: str, now: datetime) -> Menu:
        """신규 생성용 Menu 객체로 변환 (parent_id는 항상 None)"""
        return Menu(
            name=self.name,
            slug=self.slug,
            icon=self.icon,
            route=self.route,
            parent_id=None,
            order=self.order,
            is_active=self.is_active,
            menu_type=menu_type,
            created_at=now,
            updated_at=now
        )


@dataclass(frozen=True)
class MenuSeedSet:
    """
    하나의 menu_type 파티션에 대한 시드 정의

    Attributes:
        menu_type: 대상 파티션
        root_slug: 하위 메뉴들이 연결될 최상위 메뉴 slug
        entries: 시드 순서대로 정렬된 MenuSeed 목록
    """
    menu_type: str
    root_slug: str
    entries: Tuple[MenuSeed, ...]

    @property
    def expected_slugs(self) -> List[str]:
        return [entry.slug for entry in self.entries]

    @property
    def child_slugs(self) -> List[str]:
        return [entry.slug for entry in self.entries if entry.slug != self.root_slug]

    @property
    def expected_count(self) -> int:
        return len(self.entries)


class UpsertOutcome(Enum):
    """레코드별 upsert 결과"""
    INSERTED = "inserted"
    UPDATED = "updated"
    FAILED = "failed"


@dataclass
class RecordResult:
    """시드 레코드 한 건의 처리 결과"""
    slug: str
    name: str
    outcome: UpsertOutcome
    reason: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.outcome is UpsertOutcome.FAILED


@dataclass
class LinkResult:
    """
    상위-하위 연결 결과

    Attributes:
        root_id: 최상위 메뉴 ID (찾지 못하면 None)
        linked: parent_id를 새로 설정한 slug 목록
        unchanged: 이미 올바르게 연결되어 있던 slug 목록
        failures: slug별 실패 사유
        root_error: 최상위 메뉴 조회 자체가 실패한 경우의 사유
    """
    root_id: Optional[int] = None
    linked: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)
    failures: dict = field(default_factory=dict)
    root_error: Optional[str] = None

    @property
    def root_found(self) -> bool:
        return self.root_id is not None


@dataclass
class VerificationResult:
    """검증 단계 결과"""
    active_count: int
    expected_count: int
    missing_slugs: List[str] = field(default_factory=list)
    active_menus: List[Menu] = field(default_factory=list)
    total_count: int = 0

    @property
    def is_complete(self) -> bool:
        return self.active_count >= self.expected_count


@dataclass
class SeedSummary:
    """시드 실행 전체 요약"""
    menu_type: str
    results: List[RecordResult]
    link: LinkResult
    verification: VerificationResult

    def _count(self, outcome: UpsertOutcome) -> int:
        return sum(1 for result in self.results if result.outcome is outcome)

    @property
    def inserted(self) -> int:
        return self._count(UpsertOutcome.INSERTED)

    @property
    def updated(self) -> int:
        return self._count(UpsertOutcome.UPDATED)

    @property
    def failed(self) -> int:
        return self._count(UpsertOutcome.FAILED)
