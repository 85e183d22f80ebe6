"""Servicios puros del Core (sin I/O): parseo de `Link` y síntesis del sobre JSON."""
