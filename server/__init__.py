"""HTTP surface for the BrandSnap pipeline."""
