"""
orchestrator.py — Runs one generation request end to end.

Pipeline steps:
  1. Brand data  — use the caller's brandAnalysis when it has a brandName,
                   otherwise one analyzer call (AnalysisError is fatal)
  2. Plan        — banners in request order, then favicon, then logo;
                   each repeated `variants` times
  3. Generate    — strictly sequential; sleep `stagger_ms` before every image call,
                   a GenerationError drops that one asset and the batch continues
  4. Aggregate   — zero assets → AggregateFailure, else a success result carrying
                   the assets plus a trimmed brand summary

Nothing is kept between requests; an Orchestrator only holds its collaborators.
"""

from __future__ import annotations

import time
from typing import Callable, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from .analyzer import BrandAnalyzer
from .errors import AggregateFailure, AnalysisError, GenerationError
from .generator import AssetGenerator
from .imaging import to_data_url
from .models import (
    BrandDescription,
    BrandSummary,
    GeneratedAsset,
    GenerationRequest,
    GenerationResult,
    InputKind,
    Platform,
    Style,
)

console = Console()

DEFAULT_STAGGER_MS = 500

ProgressCallback = Callable[[str], None]
Job = Tuple[Platform, Optional[int]]      # (platform, variant index or None)


def plan_jobs(request: GenerationRequest) -> List[Job]:
    """Ordered image calls for a request: banners, favicon, logo × variants."""
    banners: List[Platform] = []
    for p in request.platforms:
        if p.is_banner and p not in banners:
            banners.append(p)

    targets = list(banners)
    if Platform.FAVICON in request.platforms or request.include_favicon:
        targets.append(Platform.FAVICON)
    if Platform.LOGO in request.platforms:
        targets.append(Platform.LOGO)

    if request.variants <= 1:
        return [(p, None) for p in targets]
    return [(p, v) for p in targets for v in range(1, request.variants + 1)]


class Orchestrator:
    def __init__(
        self,
        analyzer: Optional[BrandAnalyzer],
        generator: AssetGenerator,
        stagger_ms: int = DEFAULT_STAGGER_MS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.analyzer = analyzer
        self.generator = generator
        self.stagger_ms = stagger_ms
        self.sleep = sleep

    def run(
        self,
        request: GenerationRequest,
        on_progress: Optional[ProgressCallback] = None,
    ) -> GenerationResult:
        start = time.time()
        style = request.resolved_style

        brand = self._resolve_brand(request, style)
        console.print(f"[bold cyan]→ Brand:[/bold cyan] {escape(brand.brand_name)}")

        jobs = plan_jobs(request)
        console.print(
            f"  [dim]platforms: {', '.join(p.value for p, _ in jobs) or 'none'} "
            f"(style: {style.value})[/dim]"
        )

        assets: List[GeneratedAsset] = []
        for i, (platform, variant) in enumerate(jobs, start=1):
            label = platform.value if variant is None else f"{platform.value} #{variant}"
            self._progress(on_progress, f"Generating {label} ({i}/{len(jobs)})")

            self.sleep(self.stagger_ms / 1000)
            try:
                data = self._generate_one(brand, platform, style)
            except GenerationError as e:
                console.print(f"  [red]✗ Failed to generate {label}: {escape(str(e))}[/red]")
                continue

            spec = self.generator.platform_specs[platform]
            assets.append(GeneratedAsset(
                platform=platform,
                dimensions=spec.dimensions,
                base64=to_data_url(data),
                variant=variant,
            ))
            console.print(f"  [green]✓ {label} complete[/green]")

        if not assets:
            raise AggregateFailure(f"All {len(jobs)} image generation(s) failed")

        elapsed = time.time() - start
        console.print(
            f"[bold green]✓ Generated {len(assets)}/{len(jobs)} assets[/bold green] "
            f"[dim]({elapsed:.1f}s)[/dim]"
        )
        return GenerationResult(
            success=True,
            assets=assets,
            brand_analysis=BrandSummary.from_brand(brand),
        )

    # ── Steps ─────────────────────────────────────────────────────────────────

    def _resolve_brand(self, request: GenerationRequest, style: Style) -> BrandDescription:
        provided = request.brand_analysis
        if provided is not None and provided.brand_name.strip():
            console.print("  [dim]Using provided brand analysis (skipping Gemini call)[/dim]")
            return provided

        if not (request.url or request.description):
            raise AnalysisError(
                "Request carries no brand input",
                user_message="URL, description, or brandAnalysis required",
            )
        if self.analyzer is None:
            raise AnalysisError("No analyzer configured")

        if request.url:
            return self.analyzer.analyze(request.url, InputKind.URL, style, request.custom_colors)
        return self.analyzer.analyze(
            request.description or "", InputKind.TEXT, style, request.custom_colors,
        )

    def _generate_one(self, brand: BrandDescription, platform: Platform, style: Style) -> bytes:
        if platform is Platform.FAVICON:
            return self.generator.generate_icon(brand, style)
        if platform is Platform.LOGO:
            return self.generator.generate_logo(brand, style)
        return self.generator.generate_banner(brand, platform, style)

    def _progress(self, cb: Optional[ProgressCallback], msg: str) -> None:
        if cb:
            cb(msg)
