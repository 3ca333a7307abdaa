from codechat.services.chats import ChatSummary


def _register(messenger, name, phone):
    return messenger.directory.register(name, phone).code


def test_chats_only_include_direct_friends(messenger):
    a = _register(messenger, "Alice", "1")
    b = _register(messenger, "Bob", "2")
    c = _register(messenger, "Carol", "3")
    messenger.friends.add_friendship(a, b)
    messenger.friends.add_friendship(b, c)

    assert messenger.chats.chats_for(a) == [ChatSummary(user_code=b, name="Bob", last_message=None)]


def test_chat_shows_latest_message(messenger):
    a = _register(messenger, "Alice", "1")
    b = _register(messenger, "Bob", "2")
    messenger.friends.add_friendship(a, b)
    messenger.messages.append(a, b, "hi")
    messenger.messages.append(b, a, "hey there")

    [chat] = messenger.chats.chats_for(a)
    assert chat.last_message == "hey there"
    [chat] = messenger.chats.chats_for(b)
    assert chat.user_code == a
    assert chat.name == "Alice"
    assert chat.last_message == "hey there"


def test_chats_follow_friendship_order(messenger):
    a = _register(messenger, "Alice", "1")
    b = _register(messenger, "Bob", "2")
    c = _register(messenger, "Carol", "3")
    messenger.friends.add_friendship(a, b)
    messenger.friends.add_friendship(c, a)
    # Recency does not reorder the list
    messenger.messages.append(a, c, "latest")

    assert [chat.name for chat in messenger.chats.chats_for(a)] == ["Bob", "Carol"]


def test_unknown_user_has_no_chats(messenger):
    assert messenger.chats.chats_for("GHOST1") == []


def test_dangling_friend_is_skipped(messenger):
    a = _register(messenger, "Alice", "1")
    b = _register(messenger, "Bob", "2")
    c = _register(messenger, "Carol", "3")
    messenger.friends.add_friendship(a, b)
    messenger.friends.add_friendship(a, c)
    del messenger.directory._by_code[b]

    assert [chat.user_code for chat in messenger.chats.chats_for(a)] == [c]


def test_chat_summary_serializes_camel_case():
    chat = ChatSummary(user_code="AB12CD", name="Bob")
    assert chat.model_dump(by_alias=True) == {
        "userCode": "AB12CD",
        "name": "Bob",
        "lastMessage": None,
    }
