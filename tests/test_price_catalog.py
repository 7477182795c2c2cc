import pytest

from services.price_catalog import DEFAULT_PRICES, FALLBACK_PRICE


class TestInitializeDefaults:

    def test_seeds_24_rows(self, catalog):
        assert catalog.initialize_defaults() == 24
        rows = catalog.list_prices()
        assert len(rows) == 24
        assert len({r.key for r in rows}) == 24

    def test_is_idempotent(self, catalog):
        catalog.initialize_defaults()
        assert catalog.initialize_defaults() == 0
        assert len(catalog.list_prices()) == 24

    def test_skips_when_any_row_exists(self, catalog, repo):
        catalog.initialize_defaults()
        rows = repo.get_service_prices()[:1]
        repo.save_service_prices(rows)

        assert catalog.initialize_defaults() == 0
        assert len(catalog.list_prices()) == 1

    def test_default_values(self, catalog):
        catalog.initialize_defaults()
        assert catalog.get_price("thobe", "wash_iron") == 5
        assert catalog.get_price("suit", "dry_clean") == 25
        assert catalog.get_price("other", "dry_clean") == 10
        # stored as a real row with a zero price, not a missing one
        assert catalog.get_price("blanket", "iron_only") == 0
        assert catalog.find("blanket", "iron_only") is not None
        assert len(DEFAULT_PRICES) == 8


class TestGetPrice:

    def test_missing_pair_falls_back(self, catalog):
        assert catalog.get_price("thobe", "wash_iron") == FALLBACK_PRICE == 5

    def test_unknown_pair_falls_back(self, catalog):
        catalog.initialize_defaults()
        assert catalog.get_price("carpet", "steam") == 5

    def test_price_map(self, catalog):
        catalog.initialize_defaults()
        prices = catalog.price_map()
        assert len(prices) == 24
        assert prices[("jacket", "iron_only")] == 5


class TestUpdatePrice:

    def test_update_by_id(self, catalog):
        catalog.initialize_defaults()
        row = catalog.find("shirt", "wash_iron")

        assert catalog.update_price(row.id, 4.5) is True

        updated = catalog.find("shirt", "wash_iron")
        assert updated.price == 4.5
        assert updated.updated_at >= row.updated_at
        assert updated.created_at == row.created_at

    def test_unknown_id_is_noop(self, catalog, repo):
        catalog.initialize_defaults()
        before = repo.get_service_prices()

        assert catalog.update_price("does-not-exist", 99) is False
        assert repo.get_service_prices() == before

    def test_negative_price_rejected(self, catalog):
        catalog.initialize_defaults()
        row = catalog.find("shirt", "wash_iron")
        with pytest.raises(ValueError):
            catalog.update_price(row.id, -1)

    def test_set_price_resolves_pair(self, catalog):
        catalog.initialize_defaults()
        assert catalog.set_price("dress", "iron_only", 7) is True
        assert catalog.get_price("dress", "iron_only") == 7
        # other rows untouched
        assert catalog.get_price("dress", "dry_clean") == 18

    def test_set_price_without_row(self, catalog):
        assert catalog.set_price("dress", "iron_only", 7) is False
        assert catalog.list_prices() == []


class TestDamagedRows:

    def test_lookup_survives_malformed_rows(self, catalog, repo):
        catalog.initialize_defaults()
        rows = repo.get_service_prices()
        # one row loses a key, another is not a row at all
        del rows[0]["createdAt"]
        broken_key = (rows[0]["itemType"], rows[0]["serviceType"])
        rows.append("garbage")
        repo.save_service_prices(rows)

        assert len(catalog.list_prices()) == 23
        assert catalog.get_price(*broken_key) == FALLBACK_PRICE
        assert catalog.get_price("suit", "dry_clean") == 25
