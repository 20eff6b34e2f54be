"""
BrandSnap — brand analysis and marketing asset generation on Gemini / Imagen.

Modules:
- analyzer: brand description → structured BrandDescription (Gemini text)
- prompts: image prompt builders (abstract / text modes)
- retry: shared retry/backoff policy for image calls
- image_client: Imagen and Gemini image adapters
- generator: banners, favicon and logo for one brand
- orchestrator: sequential, staggered batch with partial success
- config: environment settings and component wiring
"""

__version__ = "1.0.0"
