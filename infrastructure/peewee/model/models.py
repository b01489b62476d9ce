from peewee import AutoField, BooleanField, CharField, Model, TextField
from infrastructure.peewee.session.db import db

class TaskModel(Model):
    id = AutoField()
    title = CharField()
    description = TextField(null=True)
    completed = BooleanField(default=False)

    class Meta:
        database = db
        table_name = "tasks"
