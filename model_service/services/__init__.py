"""Services Layer: domain orchestration over the repository port."""
