import unittest

from core.domain.models.task import Task

try:
    from infrastructure.peewee.session.db import db
    from infrastructure.peewee.model.models import TaskModel
    from infrastructure.peewee.repository.task_repository import (
        PeeweeTaskRepository,
    )
    HAS_PEEWEE = True
except ImportError:
    HAS_PEEWEE = False

@unittest.skipUnless(HAS_PEEWEE, "Peewee not available")
class PeeweeTaskRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        if db.is_closed():
            db.connect()
        db.drop_tables([TaskModel], safe=True)
        self.repo = PeeweeTaskRepository()

    def tearDown(self) -> None:
        db.drop_tables([TaskModel])
        db.close()

    def test_save_assigns_id_and_get(self) -> None:
        saved = self.repo.save(
            Task(id=None, title="Tarea Peewee", description="desc", completed=True)
        )

        self.assertEqual(saved.id, 1)
        self.assertEqual(self.repo.find_by_id(saved.id), saved)

    def test_save_with_id_overwrites(self) -> None:
        saved = self.repo.save(Task(id=None, title="Antes"))

        self.repo.save(Task(id=saved.id, title="Después", description="d", completed=True))

        self.assertEqual(
            self.repo.find_by_id(saved.id),
            Task(id=saved.id, title="Después", description="d", completed=True),
        )
        self.assertEqual(len(self.repo.find_all()), 1)

    def test_save_with_unknown_id_inserts(self) -> None:
        saved = self.repo.save(Task(id=10, title="Con id"))

        self.assertEqual(self.repo.find_by_id(10), saved)

    def test_find_all(self) -> None:
        for title in ("a", "b", "c"):
            self.repo.save(Task(id=None, title=title))

        titles = {t.title for t in self.repo.find_all()}

        self.assertEqual(titles, {"a", "b", "c"})

    def test_find_by_missing_id(self) -> None:
        self.assertIsNone(self.repo.find_by_id(99))

    def test_delete(self) -> None:
        saved = self.repo.save(Task(id=None, title="Eliminar Peewee"))

        self.repo.delete_by_id(saved.id)
        self.repo.delete_by_id(saved.id)

        self.assertIsNone(self.repo.find_by_id(saved.id))

    def test_close_closes_connection(self) -> None:
        self.assertFalse(db.is_closed())

        self.repo.close()

        self.assertTrue(db.is_closed())

if __name__ == "__main__":
    unittest.main()
