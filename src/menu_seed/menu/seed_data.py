"""Masters menu seed definition."""

from menu_seed.menu.models import MenuSeed, MenuSeedSet

MASTERS_MENU_TYPE = "masters"
MASTERS_ROOT_SLUG = "masters"

MASTERS_MENUS = MenuSeedSet(
    menu_type=MASTERS_MENU_TYPE,
    root_slug=MASTERS_ROOT_SLUG,
    entries=(
        # 최상위 메뉴 (그룹 노드, 경로 없음)
        MenuSeed(name="Masters", slug="masters", icon="settings", route=None, order=2),
        # Masters 하위 메뉴
        MenuSeed(name="Users", slug="masters.users", icon="people", route="/masters/users", order=1),
        MenuSeed(name="Departments", slug="masters.departments", icon="business",
                 route="/masters/departments", order=2),
        MenuSeed(name="Categories", slug="masters.categories", icon="category",
                 route="/masters/categories", order=3),
        MenuSeed(name="Priorities", slug="masters.priorities", icon="flag",
                 route="/masters/priorities", order=4),
        MenuSeed(name="Status", slug="masters.status", icon="check_circle",
                 route="/masters/status", order=5),
        MenuSeed(name="Locations", slug="masters.locations", icon="location_on",
                 route="/masters/locations", order=6),
        MenuSeed(name="Companies", slug="masters.companies", icon="corporate_fare",
                 route="/masters/companies", order=7),
    ),
)
