"""Tests for AccountStore and UniquenessGuard."""
import pytest

from cuentas.exceptions import PersistenceError
from cuentas.models.cuenta import Account, Role
from cuentas.services.account_store import AccountStore
from cuentas.services.uniqueness import UniquenessGuard


class TestAccountStore:
    def test_insert_assigns_id(self, db):
        store = AccountStore(db)
        new_id = store.insert(Account(username="jdoe", email="jdoe@x.com", password_hash="h", role=Role.PATIENT))
        assert new_id > 0
        assert store.get_by_id(new_id).username == "jdoe"

    def test_insert_duplicate_username_raises_persistence_error(self, db, make_account):
        make_account(username="jdoe", email="jdoe@x.com")
        store = AccountStore(db)
        with pytest.raises(PersistenceError) as excinfo:
            store.insert(Account(username="jdoe", email="other@x.com", password_hash="h", role=Role.PATIENT))
        assert excinfo.value.is_unique_violation
        assert excinfo.value.conflict_field() == "username"

    def test_get_missing_returns_none(self, db):
        store = AccountStore(db)
        assert store.get_by_id(999) is None
        assert store.get_by_username("ghost") is None

    def test_get_by_username_is_case_sensitive(self, db, make_account):
        make_account(username="jdoe")
        store = AccountStore(db)
        assert store.get_by_username("jdoe") is not None
        assert store.get_by_username("JDOE") is None

    def test_get_by_role_and_list_all(self, db, make_account):
        make_account(role=Role.DOCTOR)
        make_account(role=Role.PATIENT)
        make_account(role=Role.DOCTOR)
        store = AccountStore(db)
        assert len(store.get_by_role(Role.DOCTOR)) == 2
        assert len(store.get_by_role(Role.ADMIN)) == 0
        assert len(store.list_all()) == 3

    def test_update_merges_supplied_fields(self, db, make_account):
        account = make_account(first_name="Ana", age=30)
        store = AccountStore(db)
        updated = store.update(account.id, {"first_name": "Maria", "age": None})
        assert updated.first_name == "Maria"
        assert updated.age == 30

    def test_update_keeps_hash_when_password_empty(self, db, make_account):
        account = make_account()
        original_hash = account.password_hash
        store = AccountStore(db)
        updated = store.update(account.id, {"password_hash": "", "last_name": "Perez"})
        assert updated.password_hash == original_hash
        assert updated.last_name == "Perez"

    def test_update_missing_returns_none(self, db):
        assert AccountStore(db).update(42, {"first_name": "X"}) is None

    def test_update_email_collision_raises(self, db, make_account):
        make_account(email="taken@x.com")
        other = make_account(email="free@x.com")
        with pytest.raises(PersistenceError) as excinfo:
            AccountStore(db).update(other.id, {"email": "taken@x.com"})
        assert excinfo.value.conflict_field() == "email"

    def test_delete_removes_only_the_row(self, db, make_account):
        account_id = make_account().id
        store = AccountStore(db)
        assert store.delete(account_id) is True
        assert store.get_by_id(account_id) is None
        assert store.delete(account_id) is False


class TestUniquenessGuard:
    def test_username_and_email_exist(self, db, make_account):
        make_account(username="jdoe", email="jdoe@x.com")
        guard = UniquenessGuard(db)
        assert guard.username_exists("jdoe")
        assert guard.email_exists("jdoe@x.com")
        assert not guard.username_exists("Jdoe")
        assert not guard.email_exists("other@x.com")

    def test_exclude_id_ignores_own_row(self, db, make_account):
        account = make_account(username="jdoe")
        guard = UniquenessGuard(db)
        assert not guard.username_exists("jdoe", exclude_id=account.id)


class TestConflictField:
    @pytest.mark.parametrize("detail, field", [
        ("UNIQUE constraint failed: cuentas.email", "email"),
        ('duplicate key value violates unique constraint "ix_cuentas_username"\n'
         "DETAIL:  Key (username)=(email_admin) already exists.", "username"),
        ('duplicate key value violates unique constraint "cuentas_email_key"\n'
         "DETAIL:  Key (email)=(username@x.com) already exists.", "email"),
        ("(1062, \"Duplicate entry 'email_admin' for key 'cuentas.ix_cuentas_username'\")", "username"),
        ("Duplicate entry 'username@x.com' for key 'ix_cuentas_email'", "email"),
    ])
    def test_field_comes_from_column_not_value(self, detail, field):
        error = PersistenceError("Account update failed", detail=detail)
        assert error.is_unique_violation
        assert error.conflict_field() == field

    def test_unknown_constraint_falls_back_to_unique(self):
        error = PersistenceError("Account update failed", detail="UNIQUE constraint failed: cuentas.role")
        assert error.conflict_field() == "unique"
        assert PersistenceError("x", detail="duplicate key value").conflict_field() == "unique"
