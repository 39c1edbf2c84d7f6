from __future__ import annotations

import logging
import math
import os
from pathlib import Path

import mkdocs_gen_files
from mkdocs.exceptions import ConfigurationError

from approx_pi_gcd import count_coprime_pairs, pi_from_count

log = logging.getLogger("mkdocs.plugins.gen-files")

DOCS_DIR = Path(
    os.environ.get("APPROX_PI_DOCS_DIR") or Path(__file__).resolve().parents[1] / "docs"
)

LIMITS = (1, 10, 100, 1000)
HEADERS = ("N", "Coprime pairs", "Probability", "Estimate", "Error")


def _max_n() -> int:
    """Read the largest N to tabulate from APPROX_PI_DOCS_MAX_N."""
    raw = os.environ.get("APPROX_PI_DOCS_MAX_N", "1000").strip()
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"APPROX_PI_DOCS_MAX_N must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigurationError(f"APPROX_PI_DOCS_MAX_N must be at least 1, got {value}")
    return value


def _collect_rows(max_n: int) -> list[tuple[int, int, float, float, float]]:
    """Collect rows: (n, coprime_pairs, probability, estimate, abs_error)."""
    rows: list[tuple[int, int, float, float, float]] = []
    for n in LIMITS:
        if n > max_n:
            break
        cnt = count_coprime_pairs(n)
        prob = cnt / (n * n)
        estimate = pi_from_count(cnt, n)
        rows.append((n, cnt, prob, estimate, abs(estimate - math.pi)))
    return rows


def _render_table(rows: list[tuple[int, int, float, float, float]]) -> str:
    """Render the convergence table with pipes aligned across rows."""
    cells = [
        (str(n), str(cnt), f"{prob:.6f}", f"{estimate:.6f}", f"{err:.2e}")
        for n, cnt, prob, estimate, err in rows
    ]
    widths = [max(3, len(h), *(len(r[i]) for r in cells)) for i, h in enumerate(HEADERS)]

    lines: list[str] = []
    lines.append("<!-- THIS FILE IS AUTOGENERATED. DO NOT EDIT BY HAND. -->")
    lines.append("")
    lines.append("| " + " | ".join(h.ljust(w) for h, w in zip(HEADERS, widths)) + " |")
    # Numeric columns are right-aligned
    lines.append("| " + " | ".join("-" * (w - 1) + ":" for w in widths) + " |")
    for row in cells:
        lines.append("| " + " | ".join(c.rjust(w) for c, w in zip(row, widths)) + " |")
    lines.append("")
    return "\n".join(lines)


def main() -> None:
    """Main entry point for generating the convergence table snippet."""
    max_n = _max_n()
    log.info("Convergence table generator starting with APPROX_PI_DOCS_MAX_N=%d", max_n)
    content = _render_table(_collect_rows(max_n))

    rel_path = "_snippets/tables/convergence.md"

    try:
        with mkdocs_gen_files.open(rel_path, "w") as f:
            f.write(content)
    except ConfigurationError:
        # Not running via mkdocs (standalone execution)
        pass

    # Physical copy so pymdownx.snippets can find it.
    out = DOCS_DIR / rel_path
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    log.info("Wrote %s", out)


# Configure logging for standalone execution
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')

# Always run - mkdocs-gen-files imports this script, so main() must execute at module level
main()
