import os

# Todos los adaptadores SQL de los tests usan SQLite en memoria.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
