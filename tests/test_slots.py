"""Tests for the slot catalog."""

from dental_clinic.domain.scheduling.slots import catalog_slots, is_catalog_slot


class TestCatalogSlots:
    def test_morning_and_afternoon_blocks(self):
        slots = catalog_slots()

        assert slots[0] == "08:00"
        assert slots[-1] == "17:30"
        assert len(slots) == 16
        assert "11:30" in slots
        assert "14:00" in slots

    def test_lunch_gap_is_not_bookable(self):
        slots = catalog_slots()

        for lunch in ("12:00", "12:30", "13:00", "13:30"):
            assert lunch not in slots

    def test_slots_are_sorted(self):
        slots = list(catalog_slots())
        assert slots == sorted(slots)

    def test_is_catalog_slot(self):
        assert is_catalog_slot("08:30")
        assert not is_catalog_slot("08:15")
        assert not is_catalog_slot("8:30")
        assert not is_catalog_slot(None)
