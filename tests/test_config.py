import json
import pytest

from invoice_cli.components import DEFAULT_SELLER, SellerConfigLoader
from invoice_cli.exceptions import InvalidSellerConfig
from invoice_cli.settings import AppSettings


class TestSellerConfigLoader:

    def test_placeholder_block_without_file(self, tmp_path):
        seller = SellerConfigLoader(tmp_path / "missing.json").load()
        assert [entry.label for entry in seller] == [entry["label"] for entry in DEFAULT_SELLER]
        assert seller[0].value == ["YOUR NAME", "YOUR ADDRESS"]

    def test_loads_file(self, tmp_path):
        path = tmp_path / "seller.json"
        path.write_text(json.dumps([
            {"label": "From", "value": ["Jane Consulting", "2 High Street"]},
            {"label": "VAT", "value": "GB123"},
        ]), encoding="utf-8")

        seller = SellerConfigLoader(path).load()

        assert seller[1].label == "VAT"
        assert seller[1].value == "GB123"

    def test_numeric_values_are_accepted(self, tmp_path):
        path = tmp_path / "seller.json"
        path.write_text(json.dumps([{"label": "Registration number", "value": 12345678}]), encoding="utf-8")
        assert SellerConfigLoader(path).load()[0].value == 12345678

    @pytest.mark.parametrize("content", ["{", json.dumps({"label": "From"}), json.dumps([{"value": "x"}])])
    def test_invalid_file(self, tmp_path, content):
        path = tmp_path / "seller.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(InvalidSellerConfig):
            SellerConfigLoader(path).load()


class TestAppSettings:

    def test_defaults_hang_off_root(self, tmp_path):
        settings = AppSettings.from_root(tmp_path)
        assert settings.records_dir == tmp_path / "invoices"
        assert settings.output_dir == tmp_path / "generated_invoices"
        assert settings.seller_config is None
        assert settings.render_format == "pdf"

    def test_seller_json_in_root_is_picked_up(self, tmp_path):
        (tmp_path / "seller.json").write_text("[]", encoding="utf-8")
        assert AppSettings.from_root(tmp_path).seller_config == tmp_path / "seller.json"

    def test_explicit_directories(self, tmp_path):
        settings = AppSettings.from_root(tmp_path, records_dir=tmp_path / "r", output_dir=tmp_path / "o")
        assert settings.records_dir == tmp_path / "r"
        assert settings.output_dir == tmp_path / "o"
