from __future__ import annotations

from clickerengine.definition import Catalog
from clickerengine.simulation import PlayReport


def format_text_report(report: PlayReport) -> str:
    """Format an autoplay report for console output."""
    lines: list[str] = []

    lines.append("=" * 30 + " Clicker Autoplay Report " + "=" * 30)
    lines.append(f"Strategy: {report.strategy_description}")
    lines.append(f"Played: {report.seconds}s, {report.clicks} clicks")
    lines.append(f"Earned: {report.click_earned:.1f} clicking, {report.tick_earned:.1f} idle")
    lines.append(f"Final total: {report.final_total:.1f} ({report.final_rate:.1f}/s)")
    lines.append("")

    lines.append("PURCHASES:")
    lines.append(f"  Total: {len(report.purchases)}")
    for p in report.purchases:
        lines.append(f"  {p.time:>6d}s {p.kind:<9s} {p.element_id:.<30s} {p.cost:.0f}")
    lines.append("")

    if report.buildings:
        lines.append("BUILDINGS:")
        for bid, count in report.buildings.items():
            lines.append(f"  {bid:.<30s} x{count}")
    if report.upgrades:
        lines.append("UPGRADES:")
        for uid in report.upgrades:
            lines.append(f"  * {uid}")

    return "\n".join(lines)


def format_catalog(catalog: Catalog) -> str:
    """Format a catalog overview for console output."""
    lines: list[str] = []
    lines.append(f"Game: {catalog.config.name}")
    lines.append(
        f"Currency: {catalog.currency.display_name} "
        f"(+{catalog.currency.percent_incr:.0%} cost per unit owned)"
    )
    lines.append(f"Click: {catalog.clickable.display_name} = {catalog.clickable.amount:g}")
    lines.append("")

    lines.append("BUILDINGS:")
    for b in catalog.buildings:
        lines.append(f"  {b.id:.<24s} cost {b.cost:g}, {b.amount:g}/s")
    lines.append("UPGRADES:")
    for u in catalog.upgrades:
        lines.append(f"  {u.id:.<24s} cost {u.cost:g}, {len(u.perks)} perk(s)")

    return "\n".join(lines)
