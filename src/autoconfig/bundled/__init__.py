"""Recursos de configuração embarcados (defaults)."""
