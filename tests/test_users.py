"""Tests for the user directory normalization."""

from conftest import load_fixture
from crs_slack.users import UserRecord, build_user_directory, clean_display_name


def member(user_id, display_name, is_bot=False, deleted=False, **extra):
    return {
        "id": user_id,
        "name": f"name-{user_id}",
        "real_name": f"real-{user_id}",
        "is_bot": is_bot,
        "deleted": deleted,
        "profile": {"display_name": display_name},
        **extra,
    }


def test_excludes_bots_and_deleted_members():
    members = [
        {
            "id": "U1",
            "name": "user1",
            "real_name": "ユーザー1",
            "deleted": False,
            "is_bot": False,
            "profile": {"display_name": "ユーザー1"},
        },
        {
            "id": "U2",
            "name": "user2",
            "real_name": "ユーザー2",
            "deleted": True,
            "is_bot": False,
            "profile": {"display_name": "削除済み"},
        },
        {
            "id": "U3",
            "name": "bot",
            "real_name": "ボット",
            "deleted": False,
            "is_bot": True,
            "profile": {"display_name": "ボット"},
        },
    ]

    directory = build_user_directory(members)

    assert list(directory) == ["ユーザー1"]
    assert directory["ユーザー1"] == UserRecord(id="U1", display_name="ユーザー1", name="user1", real_name="ユーザー1")


def test_clean_display_name_removes_half_and_full_width_spaces():
    assert clean_display_name("ユーザー サンプル") == "ユーザーサンプル"
    assert clean_display_name("ユーザー　サンプル") == "ユーザーサンプル"
    assert clean_display_name("  Taro\tYamada\n") == "TaroYamada"
    assert clean_display_name(None) == ""


def test_clean_display_name_is_idempotent():
    for name in ["ユーザー　サンプル", " a b c ", "plain", "　", ""]:
        once = clean_display_name(name)
        assert clean_display_name(once) == once


def test_whitespace_variants_collapse_to_last_member():
    members = [
        member("U1", "山田 太郎"),
        member("U2", "山田　太郎"),
    ]

    directory = build_user_directory(members)

    assert list(directory) == ["山田太郎"]
    assert directory["山田太郎"].id == "U2"


def test_skips_blank_and_missing_display_names():
    members = [
        member("U1", ""),
        member("U2", " 　 "),
        {"id": "U3", "name": "n", "real_name": "r", "is_bot": False, "deleted": False, "profile": {}},
        {"id": "U4", "name": "n", "real_name": "r", "is_bot": False, "deleted": False},
    ]

    assert build_user_directory(members) == {}


def test_recorded_users_list_response():
    directory = build_user_directory(load_fixture("users_list")["members"])

    assert set(directory) == {"Slackbot", "ユーザーサンプル"}
    assert directory["Slackbot"].id == "USLACKBOT"
    # the full-width spaced name comes later in the listing and wins
    assert directory["ユーザーサンプル"].id == "U08RW7MHUG7"
    assert directory["ユーザーサンプル"].to_dict() == {
        "id": "U08RW7MHUG7",
        "display_name": "ユーザーサンプル",
        "name": "user.name2",
        "real_name": "ユーザー　サンプル",
    }
