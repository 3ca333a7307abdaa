import pytest

from codechat.services.errors import (
    AlreadyFriendsError,
    SelfFriendshipError,
    UserNotFoundError,
)


@pytest.fixture
def users(messenger):
    alice = messenger.directory.register("Alice", "1")
    bob = messenger.directory.register("Bob", "2")
    carol = messenger.directory.register("Carol", "3")
    return alice.code, bob.code, carol.code


def test_add_friendship(messenger, users):
    a, b, _ = users
    edge = messenger.friends.add_friendship(a, b)

    assert (edge.user1, edge.user2) == (a, b)
    assert edge.id
    assert messenger.friends.are_friends(a, b)
    assert messenger.friends.are_friends(b, a)
    assert len(messenger.friends) == 1


def test_reverse_orientation_is_duplicate(messenger, users):
    a, b, _ = users
    messenger.friends.add_friendship(a, b)

    with pytest.raises(AlreadyFriendsError):
        messenger.friends.add_friendship(b, a)
    with pytest.raises(AlreadyFriendsError):
        messenger.friends.add_friendship(a, b)
    assert len(messenger.friends) == 1


def test_self_friendship_rejected(messenger, users):
    a, _, _ = users
    with pytest.raises(SelfFriendshipError):
        messenger.friends.add_friendship(a, a)
    assert len(messenger.friends) == 0


def test_self_friendship_of_unknown_code_fails(messenger):
    with pytest.raises(UserNotFoundError):
        messenger.friends.add_friendship("GHOST1", "GHOST1")


@pytest.mark.parametrize("pair", [("known", "GHOST1"), ("GHOST1", "known")])
def test_unknown_user_rejected(messenger, users, pair):
    a, _, _ = users
    user_code, friend_code = (a if c == "known" else c for c in pair)

    with pytest.raises(UserNotFoundError):
        messenger.friends.add_friendship(user_code, friend_code)
    assert len(messenger.friends) == 0


def test_friends_of_follows_insertion_order(messenger, users):
    a, b, c = users
    messenger.friends.add_friendship(c, a)
    messenger.friends.add_friendship(a, b)

    assert messenger.friends.friends_of(a) == [c, b]
    assert messenger.friends.friends_of(b) == [a]
    assert messenger.friends.friends_of("GHOST1") == []


def test_are_friends_without_edge(messenger, users):
    a, b, c = users
    messenger.friends.add_friendship(a, b)
    assert not messenger.friends.are_friends(a, c)
    assert not messenger.friends.are_friends(a, a)
