import os
from playhouse.db_url import connect

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

# Peewee abre una conexión por hilo bajo demanda (autoconnect).
db = connect(DATABASE_URL)
