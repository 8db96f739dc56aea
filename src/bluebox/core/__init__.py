"""Core: configuración, dominio, errores e interfaces (sin I/O)."""
