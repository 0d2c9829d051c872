"""Tests for the credential store and profile registry."""

import pytest
import threading

from modules.accounts.exceptions import AccountNotFoundError, DuplicateIdentifierError
from modules.accounts.repository import CredentialStore, ProfileRegistry
from shared.identifiers import format_identifier


@pytest.fixture
def store(hasher, clock):
    return CredentialStore(hasher, clock=clock)


@pytest.fixture
def registry(store, clock):
    return ProfileRegistry(store, clock=clock)


class TestCredentialStore:
    def test_create_account(self, store, clock):
        """Should create an account with a hashed password."""
        account = store.create("alice", "a@x.com", "secret1")
        assert account.username == "alice"
        assert account.email == "a@x.com"
        assert account.password_hash != "secret1"
        assert account.password_hash.startswith("$argon2id$")
        assert account.created_at == clock.now
        assert account.last_login is None
        assert len(account.id) == 32

    def test_password_hash_not_in_repr(self, store):
        account = store.create("alice", "a@x.com", "secret1")
        assert account.password_hash not in repr(account)

    def test_find_by_username_or_email(self, store):
        """Login identifier should match username or email exactly."""
        account = store.create("alice", "a@x.com", "secret1")
        assert store.find_by_login_identifier("alice") == account
        assert store.find_by_login_identifier("a@x.com") == account
        assert store.find_by_login_identifier("Alice") is None
        assert store.find_by_login_identifier("bob") is None

    def test_find_by_id_accepts_both_forms(self, store):
        account = store.create("alice", "a@x.com", "secret1")
        assert store.find_by_id(account.id) == account
        assert store.find_by_id(format_identifier(account.id)) == account
        assert store.find_by_id("not-an-id") is None

    def test_duplicate_username(self, store):
        store.create("alice", "a@x.com", "secret1")
        with pytest.raises(DuplicateIdentifierError) as exc_info:
            store.create("alice", "other@x.com", "secret2")
        assert exc_info.value.field == "username"

    def test_duplicate_email(self, store):
        store.create("alice", "a@x.com", "secret1")
        with pytest.raises(DuplicateIdentifierError) as exc_info:
            store.create("bob", "a@x.com", "secret2")
        assert exc_info.value.field == "email"

    def test_username_may_not_shadow_email(self, store):
        """A username equal to another account's email would be ambiguous at login."""
        store.create("alice", "a@x.com", "secret1")
        with pytest.raises(DuplicateIdentifierError):
            store.create("a@x.com", "b@x.com", "secret2")

    def test_concurrent_create_single_winner(self, store):
        """Only one of several concurrent creates with one username succeeds."""
        results: list[str] = []
        barrier = threading.Barrier(5)

        def attempt(i: int) -> None:
            barrier.wait()
            try:
                store.create("alice", f"a{i}@x.com", "secret1")
                results.append("ok")
            except DuplicateIdentifierError:
                results.append("duplicate")

        threads = [threading.Thread(target=attempt, args=(i,)) for i in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count("ok") == 1
        assert results.count("duplicate") == 4
        assert store.count() == 1

    def test_verify_password(self, store):
        account = store.create("alice", "a@x.com", "secret1")
        assert store.verify_password(account, "secret1") is True
        assert store.verify_password(account, "wrong") is False

    def test_verify_unknown_always_false(self, store):
        assert store.verify_unknown("anything") is False

    def test_update_password_hash(self, store):
        account = store.create("alice", "a@x.com", "secret1")
        store.update_password_hash(account.id, store.hash_password("newpass"))
        updated = store.find_by_id(account.id)
        assert store.verify_password(updated, "newpass") is True
        assert store.verify_password(updated, "secret1") is False

    def test_update_password_hash_unknown_user(self, store):
        with pytest.raises(AccountNotFoundError):
            store.update_password_hash("0" * 32, "hash")

    def test_touch_last_login(self, store, clock):
        account = store.create("alice", "a@x.com", "secret1")
        clock.advance(60)
        store.touch_last_login(account.id)
        assert store.find_by_id(account.id).last_login == clock.now


class TestProfileRegistry:
    def test_create_profile(self, store, registry, clock):
        account = store.create("alice", "a@x.com", "secret1")
        profile = registry.create(account.id, "AliceMC")
        assert profile.owner_user_id == account.id
        assert profile.name == "AliceMC"
        assert profile.created_at == clock.now
        assert profile.id != account.id

    def test_create_requires_owner(self, registry):
        with pytest.raises(AccountNotFoundError):
            registry.create("0" * 32, "Ghost")

    def test_list_preserves_creation_order(self, store, registry):
        account = store.create("alice", "a@x.com", "secret1")
        first = registry.create(account.id, "First")
        second = registry.create(account.id, "Second")
        third = registry.create(account.id, "Third")
        assert registry.list_by_owner(account.id) == [first, second, third]

    def test_list_empty_for_no_profiles(self, store, registry):
        account = store.create("alice", "a@x.com", "secret1")
        assert registry.list_by_owner(account.id) == []
        assert registry.list_by_owner("garbage") == []

    def test_list_is_per_owner(self, store, registry):
        alice = store.create("alice", "a@x.com", "secret1")
        bob = store.create("bob", "b@x.com", "secret2")
        registry.create(alice.id, "AliceMC")
        bob_profile = registry.create(bob.id, "BobMC")
        assert registry.list_by_owner(bob.id) == [bob_profile]

    def test_find_by_id(self, store, registry):
        account = store.create("alice", "a@x.com", "secret1")
        profile = registry.create(account.id, "AliceMC")
        assert registry.find_by_id(profile.id) == profile
        assert registry.find_by_id(format_identifier(profile.id)) == profile
        assert registry.find_by_id("0" * 32) is None
