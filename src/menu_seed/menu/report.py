"""
Seed report formatter.

Turns a SeedSummary into the human-readable lines printed at the end of a run.
"""

from typing import List

from menu_seed.menu.models import Menu, SeedSummary


def format_menu_line(menu: Menu) -> str:
    """
    Format one active menu with its parent linkage.

    Example:
        >>> format_menu_line(Menu(id=2, name="Users", slug="masters.users",
        ...                       route="/masters/users", order=1, parent_id=1))
        '  [1] Users (masters.users) -> /masters/users (parent: 1)'
    """
    parent_info = f" (parent: {menu.parent_id})" if menu.has_parent() else " (main)"
    route = menu.route if menu.route is not None else ""
    return f"  [{menu.order}] {menu.name} ({menu.slug}) -> {route}".rstrip() + parent_info


def format_report(summary: SeedSummary) -> List[str]:
    """Build the verification report lines for a finished run."""
    verification = summary.verification
    lines = [
        "=== Verification ===",
        f"Total active {summary.menu_type} menus: {verification.active_count}",
        f"Inserted: {summary.inserted}, Updated: {summary.updated}, Failed: {summary.failed}",
    ]

    for result in summary.results:
        if result.failed:
            lines.append(f"  ❌ Failed: {result.slug} ({result.reason})")

    if summary.link.root_error is not None:
        lines.append(
            f"❌ Root menu lookup failed, children were not linked ({summary.link.root_error})"
        )
    elif not summary.link.root_found:
        lines.append(f"⚠️  WARNING: {summary.menu_type} root menu not found, children were not linked")
    for slug, reason in summary.link.failures.items():
        lines.append(f"  ⚠️  Link failed: {slug} ({reason})")

    if verification.is_complete:
        lines.append(f"✅ All {summary.menu_type} menus are present!")
    else:
        lines.append(
            f"⚠️  WARNING: Expected {verification.expected_count} {summary.menu_type} menus, "
            f"found {verification.active_count}"
        )
        lines.append("Missing menus:")
        lines.extend(f"  ❌ Missing: {slug}" for slug in verification.missing_slugs)

    lines.append(f"📋 {summary.menu_type.capitalize()} Menus List:")
    lines.extend(format_menu_line(menu) for menu in verification.active_menus)
    lines.append(f"Total {summary.menu_type} menus: {verification.total_count}")

    return lines
