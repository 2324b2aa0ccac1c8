"""Application layer: request pipeline orchestration."""
