"""
tests/conftest.py
=================
Shared fixtures: toolkits with default and translated settings.
"""
import random

import pytest

from password_toolkit import PasswordToolKit


SPANISH_SETTINGS = {
    "maximum": 30,
    "suggestions": [
        "La contraseña debe tener al menos 8 caracteres.",
        "Agregue letras mayúsculas y minúsculas para que la contraseña sea más segura.",
        "Agregue números para que la contraseña sea más segura.",
        "Agregue símbolos para que la contraseña sea más segura.",
        "Evitar el uso de caracteres repetidos en la contraseña.",
        "Evitar el uso de patrones de contraseña comunes.",
        "¡Excelente! La contraseña es segura.",
    ],
    "qualities": ["Inseguro", "Bajo", "Medio", "Alto", "Perfecto"],
}


@pytest.fixture
def toolkit():
    return PasswordToolKit()


@pytest.fixture
def spanish_settings():
    return {
        key: list(value) if isinstance(value, list) else value
        for key, value in SPANISH_SETTINGS.items()
    }


@pytest.fixture
def spanish_toolkit(spanish_settings):
    return PasswordToolKit(spanish_settings)


@pytest.fixture
def seeded_toolkit():
    return PasswordToolKit(rng=random.Random(1234))


@pytest.fixture
def all_flags():
    return {
        "size": 10,
        "numbers": True,
        "symbols": True,
        "uppercases": True,
        "lowercases": True,
    }
