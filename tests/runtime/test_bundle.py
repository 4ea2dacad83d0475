# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for Bundle typed access and Intent."""

from syringe.runtime import Bundle, Intent, Parcelable, Serializable


class Token(Serializable):
    pass


class Ticket(Parcelable):
    pass


class TestBundle:
    def test_contains_key(self):
        bundle = Bundle({"a": 1})
        assert bundle.contains_key("a")
        assert not bundle.contains_key("b")
        assert "a" in bundle

    def test_put_chains(self):
        bundle = Bundle().put("a", 1).put("b", "x")
        assert len(bundle) == 2
        assert sorted(bundle) == ["a", "b"]

    def test_typed_getters(self):
        bundle = Bundle({"i": 3, "f": 1.5, "b": True, "s": "text", "c": "z"})

        assert bundle.get_int("i") == 3
        assert bundle.get_long("i") == 3
        assert bundle.get_float("f") == 1.5
        assert bundle.get_double("i") == 3
        assert bundle.get_boolean("b") is True
        assert bundle.get_string("s") == "text"
        assert bundle.get_char("c") == "z"

    def test_absent_key_yields_default(self):
        bundle = Bundle()

        assert bundle.get_int("i", 7) == 7
        assert bundle.get_int("i") == 0
        assert bundle.get_string("s") is None
        assert bundle.get_string("s", "fallback") == "fallback"
        assert bundle.get_boolean("b") is False

    def test_value_of_other_kind_yields_default(self):
        bundle = Bundle({"flag": True, "number": 1, "word": "long"})

        assert bundle.get_int("flag", 5) == 5
        assert bundle.get_boolean("number") is False
        assert bundle.get_char("word", "x") == "x"
        assert bundle.get_string("number") is None

    def test_serializable_and_parcelable(self):
        token, ticket = Token(), Ticket()
        bundle = Bundle({"token": token, "ticket": ticket})

        assert bundle.get_serializable("token") is token
        assert bundle.get_serializable("ticket") is None
        assert bundle.get_parcelable("ticket") is ticket

    def test_raw_get(self):
        assert Bundle({"a": [1]}).get("a") == [1]
        assert Bundle().get("a") is None


class TestIntent:
    def test_mapping_extras_become_bundle(self):
        intent = Intent("/app/main", {"a": 1})
        assert isinstance(intent.extras, Bundle)
        assert intent.extras.get_int("a") == 1

    def test_no_extras(self):
        assert Intent("/app/main").extras is None
