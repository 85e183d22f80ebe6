"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los interceptores concretos.
- Permite invertir dependencias: el transporte depende de abstracciones.
"""
