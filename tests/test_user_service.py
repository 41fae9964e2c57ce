import unittest

from sqlalchemy import select

from inventory_api.core.exceptions import AlreadyExistsError, ValidationError
from inventory_api.models.user import User
from inventory_api.services import user_service
from tests.support import make_session_factory


class UserServiceTest(unittest.TestCase):
    def setUp(self):
        self.engine, Session = make_session_factory()
        self.db = Session()
        self.bee = user_service.create_user(
            self.db, name="B", email="b@example.com", password="secret1"
        )
        user_service.create_user(self.db, name="Cee", email="c@example.com", password="secret1")

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def _stored(self, user_id):
        return self.db.execute(
            select(User.name, User.email, User.role).where(User.id == user_id)
        ).one()

    def test_rejected_update_leaves_nothing_pending(self):
        with self.assertRaises(AlreadyExistsError) as ctx:
            user_service.update_user(
                self.db, self.bee.id, {"name": "Bee", "email": "C@example.com"}
            )
        self.assertEqual(str(ctx.exception), "Email already exists")

        with self.assertRaises(ValidationError):
            user_service.update_user(self.db, self.bee.id, {"name": "Bee", "role": "owner"})

        user_service.create_user(self.db, name="Dee", email="d@example.com", password="secret1")

        self.assertEqual(tuple(self._stored(self.bee.id)), ("B", "b@example.com", "user"))

    def test_update_applies_supplied_fields(self):
        updated = user_service.update_user(
            self.db,
            self.bee.id,
            {"name": " Bee ", "email": "BEE@example.com", "role": "admin", "password": "newpass"},
        )

        self.assertEqual(tuple(self._stored(updated.id)), ("Bee", "bee@example.com", "admin"))
        self.assertIsNotNone(user_service.authenticate(self.db, "bee@example.com", "newpass"))
        self.assertIsNone(user_service.authenticate(self.db, "bee@example.com", "secret1"))

    def test_blank_name_is_rejected(self):
        with self.assertRaises(ValidationError):
            user_service.create_user(self.db, name="  ", email="x@example.com", password="secret1")
        with self.assertRaises(ValidationError):
            user_service.update_user(self.db, self.bee.id, {"name": "   "})

    def test_inactive_user_cannot_authenticate(self):
        user_service.update_user(self.db, self.bee.id, {"is_active": False})
        self.assertIsNone(user_service.authenticate(self.db, "b@example.com", "secret1"))

    def test_cannot_delete_self(self):
        with self.assertRaises(ValidationError):
            user_service.delete_user(self.db, self.bee.id, acting_user_id=self.bee.id)


if __name__ == "__main__":
    unittest.main()
