from codechat.utils.identity import IdentitySupplier


class ScriptedIdentity(IdentitySupplier):
    """Identity supplier that hands out a fixed sequence of codes."""

    def __init__(self, codes):
        super().__init__()
        self._codes = iter(codes)

    def new_code(self):
        return next(self._codes)


def register(client, name, phone):
    r = client.post("/api/register", json={"name": name, "phone": phone})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True, body
    return body["user"]["code"]


def befriend(client, user_code, friend_code):
    r = client.post("/api/add-friend", json={"userCode": user_code, "friendCode": friend_code})
    assert r.json()["success"] is True
