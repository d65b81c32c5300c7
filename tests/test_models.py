import unittest
from pydantic import ValidationError

from pokedex.core.models import Pokemon, NamedResource, Category, PageState, SearchState

PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "height": 4,
    "weight": 60,
    "base_experience": 112,
    "types": [{"slot": 1, "type": {"name": "electric", "url": "https://pokeapi.co/api/v2/type/13/"}}],
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "https://pokeapi.co/api/v2/stat/1/"}},
        {"base_stat": 90, "effort": 2, "stat": {"name": "speed", "url": "https://pokeapi.co/api/v2/stat/6/"}},
    ],
    "abilities": [
        {"ability": {"name": "static", "url": "https://pokeapi.co/api/v2/ability/9/"}, "is_hidden": False, "slot": 1},
        {"ability": {"name": "lightning-rod", "url": "https://pokeapi.co/api/v2/ability/31/"}, "is_hidden": True, "slot": 3},
    ],
    "moves": [
        {"move": {"name": "thunder-shock", "url": "https://pokeapi.co/api/v2/move/84/"}, "version_group_details": []},
        {"move": {"name": "quick-attack", "url": "https://pokeapi.co/api/v2/move/98/"}, "version_group_details": []},
    ],
    "sprites": {
        "front_default": "https://example.org/front/25.png",
        "other": {"official-artwork": {"front_default": "https://example.org/art/25.png"}},
    },
}

class TestPokemonModel(unittest.TestCase):
    def test_parse_api_payload(self):
        p = Pokemon(**PIKACHU)
        self.assertEqual(p.id, 25)
        self.assertEqual(p.display_name, "Pikachu")
        self.assertEqual(p.primary_type, "electric")
        self.assertEqual(p.type_names, ["electric"])
        self.assertEqual(p.move_names, ["thunder-shock", "quick-attack"])
        self.assertTrue(p.abilities[1].is_hidden)
        self.assertEqual(p.image_url, "https://example.org/art/25.png")

    def test_image_fallbacks(self):
        data = dict(PIKACHU, sprites={"front_default": "https://example.org/front/25.png", "other": {}})
        self.assertEqual(Pokemon(**data).image_url, "https://example.org/front/25.png")
        self.assertIsNone(Pokemon(id=1, name="missingno").image_url)

    def test_primary_type_uses_slot_order(self):
        data = dict(PIKACHU, types=[
            {"slot": 2, "type": {"name": "flying", "url": ""}},
            {"slot": 1, "type": {"name": "normal", "url": ""}},
        ])
        self.assertEqual(Pokemon(**data).primary_type, "normal")
        self.assertEqual(Pokemon(id=1, name="x").primary_type, "normal")

    def test_records_are_immutable(self):
        p = Pokemon(**PIKACHU)
        with self.assertRaises(ValidationError):
            p.name = "raichu"

class TestResources(unittest.TestCase):
    def test_named_resource_id(self):
        self.assertEqual(NamedResource(name="bulbasaur", url="https://pokeapi.co/api/v2/pokemon/1/").id, 1)
        self.assertIsNone(NamedResource(name="bulbasaur").id)
        self.assertIsNone(NamedResource(name="x", url="https://pokeapi.co/api/v2/pokemon/").id)

    def test_category(self):
        c = Category(name="fire", url="https://pokeapi.co/api/v2/type/10/")
        self.assertEqual(c.id, "fire")
        self.assertEqual(c.display_name, "Fire")

class TestPageState(unittest.TestCase):
    def test_total_pages(self):
        self.assertEqual(PageState(page_size=8, total_items=0).total_pages, 0)
        self.assertEqual(PageState(page_size=8, total_items=8).total_pages, 1)
        self.assertEqual(PageState(page_size=8, total_items=1302).total_pages, 163)

    def test_page_is_clamped(self):
        self.assertEqual(PageState(current_page=5, page_size=8, total_items=0).current_page, 1)
        self.assertEqual(PageState(current_page=10, page_size=8, total_items=20).current_page, 3)
        self.assertEqual(PageState(current_page=0, page_size=8, total_items=20).current_page, 1)

    def test_invalid_page_size(self):
        with self.assertRaises(ValidationError):
            PageState(page_size=0)

    def test_slice(self):
        items = list(range(20))
        state = PageState(current_page=3, page_size=8, total_items=20)
        self.assertEqual(state.slice(items), [16, 17, 18, 19])
        self.assertEqual(state.with_page(1).slice(items), list(range(8)))

    def test_with_total_clamps_existing_page(self):
        state = PageState(current_page=6, page_size=8, total_items=100)
        self.assertEqual(state.with_total(16).current_page, 2)

class TestSearchState(unittest.TestCase):
    def test_toggle(self):
        s = SearchState(query="fire")
        self.assertEqual(s.sort_order, "asc")
        self.assertEqual(s.toggled().sort_order, "desc")
        self.assertEqual(s.toggled().toggled().sort_order, "asc")
        self.assertEqual(s.toggled().query, "fire")

    def test_with_query(self):
        self.assertEqual(SearchState().with_query(None).query, "")
        self.assertEqual(SearchState(sort_order="desc").with_query("tail").sort_order, "desc")

    def test_invalid_sort_order(self):
        with self.assertRaises(ValidationError):
            SearchState(sort_order="up")

if __name__ == '__main__':
    unittest.main()
