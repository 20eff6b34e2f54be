"""
BrandSnap — command-line runner

Usage:
  python -m brandsnap.main --description "Acme Rockets, a space logistics startup" \
      --platforms twitter linkedin favicon --style minimal
  python -m brandsnap.main --url https://acme.dev --platforms og logo --colors "#112233" "#ffcc00"
"""

from __future__ import annotations

import argparse
import base64
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .config import build_orchestrator, load_settings
from .errors import BrandSnapError
from .models import BrandSummary, GeneratedAsset, GenerationRequest, Platform, Style

console = Console()

OUTPUTS_ROOT = Path("outputs")

_EXTENSIONS = {"image/png": "png", "image/jpeg": "jpg", "image/webp": "webp"}


# ── CLI ───────────────────────────────────────────────────────────────────────

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="BrandSnap — brand analysis + marketing asset generator"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", help="Website URL of the brand")
    source.add_argument("--description", help="Free-text brand description")
    parser.add_argument(
        "--platforms",
        nargs="+",
        choices=[p.value for p in Platform],
        default=[Platform.TWITTER.value],
        help="Assets to generate",
    )
    parser.add_argument(
        "--style",
        choices=[s.value for s in Style],
        default=Style.MINIMAL.value,
    )
    parser.add_argument("--colors", nargs="+", default=None, help="Force these hex colors")
    parser.add_argument("--favicon", action="store_true", help="Also generate a favicon")
    parser.add_argument("--variants", type=int, default=1, choices=range(1, 5))
    parser.add_argument(
        "--output",
        default=None,
        help="Output directory (default: outputs/<timestamp>)",
    )
    return parser.parse_args(argv)


# ── Output helpers ────────────────────────────────────────────────────────────

def display_brand(summary: BrandSummary) -> None:
    palette = "  ".join(f"[bold]{c}[/bold]" for c in summary.brand_colors)
    body = (
        f"[italic]{escape(summary.summary or '—')}[/italic]\n\n"
        f"[bold]Industry:[/bold] {escape(summary.industry or '—')}\n"
        f"[bold]Vibe:[/bold] {escape(summary.vibe or '—')}\n"
        f"[bold]Slogan:[/bold] {escape(summary.slogan or '—')}\n"
        f"[bold]CTA:[/bold] {escape(summary.cta or '—')}\n"
        f"[bold]Colors:[/bold] {palette or '—'}\n"
        f"[bold]Icon concept:[/bold] {escape(summary.icon_concept or '—')}"
    )
    console.print(
        Panel(body, title=f"[bold]{escape(summary.brand_name)}[/bold]", border_style="blue")
    )


def save_asset(asset: GeneratedAsset, output_dir: Path) -> Path:
    """Decode an asset's data URL and write it next to the other outputs."""
    header, _, payload = asset.base64.partition(",")
    mime = header[len("data:"):].split(";", 1)[0] if header.startswith("data:") else "image/png"
    suffix = f"_v{asset.variant}" if asset.variant else ""
    path = output_dir / f"{asset.platform.value}{suffix}.{_EXTENSIONS.get(mime, 'png')}"
    path.write_bytes(base64.b64decode(payload))
    return path


def save_brand_json(summary: BrandSummary, output_dir: Path) -> Path:
    path = output_dir / "brand.json"
    path.write_text(
        json.dumps(summary.model_dump(by_alias=True, exclude_none=True), indent=2),
        encoding="utf-8",
    )
    return path


# ── Main ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    request = GenerationRequest(
        url=args.url,
        description=args.description,
        platforms=[Platform(p) for p in args.platforms],
        style=args.style,
        custom_colors=args.colors,
        include_favicon=args.favicon,
        variants=args.variants,
    )

    try:
        orchestrator = build_orchestrator(load_settings())
        result = orchestrator.run(
            request, on_progress=lambda msg: console.print(f"[cyan]{escape(msg)}[/cyan]")
        )
    except BrandSnapError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        return 1

    output_dir = Path(args.output) if args.output else (
        OUTPUTS_ROOT / datetime.now().strftime("%Y%m%d_%H%M%S")
    )
    output_dir.mkdir(parents=True, exist_ok=True)

    if result.brand_analysis is not None:
        display_brand(result.brand_analysis)
        save_brand_json(result.brand_analysis, output_dir)

    for asset in result.assets:
        path = save_asset(asset, output_dir)
        console.print(f"  [green]✓[/green] {asset.platform.value} {asset.width}×{asset.height} → {path}")

    console.print(f"\n[bold green]Done.[/bold green] Outputs in [bold]{output_dir}[/bold]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
