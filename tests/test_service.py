"""
Unit Tests for the invoice service and renderer adapter.

Tests single and batch document generation and failure isolation.
"""
import json
import pytest

from invoice_cli.exceptions import InvalidSellerConfig, MalformedRecord, RecordNotFound, RenderError
from invoice_cli.renderer import RendererAdapter
from invoice_cli.service import InvoiceService
from invoice_cli.settings import AppSettings
from invoice_cli.strategies import PdfRenderStrategy, XlsxRenderStrategy


@pytest.fixture
def recording_service(store, output_dir, seller, recording_strategy):
    return InvoiceService(store, RendererAdapter(recording_strategy, output_dir), seller)


class TestRendererAdapter:

    def test_output_path_follows_file_name(self, output_dir, sample_record):
        adapter = RendererAdapter(PdfRenderStrategy(), output_dir)
        assert adapter.output_path_for(sample_record) == output_dir / "acme-corp-invoice.pdf"

    def test_render_creates_output_directory(self, output_dir, sample_record, recording_strategy):
        path = RendererAdapter(recording_strategy, output_dir).render(sample_record)
        assert path == output_dir / "acme-corp-invoice.txt"
        assert path.read_text(encoding="utf-8") == "INVOICE"

    def test_backend_failure_becomes_render_error(self, output_dir, make_record, make_strategy):
        adapter = RendererAdapter(make_strategy(fail_for={"C-001"}), output_dir)
        with pytest.raises(RenderError) as excinfo:
            adapter.render(make_record())
        assert isinstance(excinfo.value.__cause__, RuntimeError)


class TestRenderOne:

    def test_render_one(self, service, store, sample_record, output_dir):
        store.save(sample_record)
        path = service.render_one("acme-corp-invoice.json")
        assert path == output_dir / "acme-corp-invoice.pdf"
        assert path.read_bytes().startswith(b"%PDF")

    def test_missing_record(self, service):
        service.prepare()
        with pytest.raises(RecordNotFound):
            service.render_one("ghost-invoice.json")

    def test_malformed_record(self, service, store):
        store.ensure_directory()
        (store.records_dir / "bad-invoice.json").write_text("[]", encoding="utf-8")
        with pytest.raises(MalformedRecord):
            service.render_one("bad-invoice.json")


class TestRenderAll:

    def test_malformed_record_does_not_stop_the_batch(self, service, store, make_record, output_dir):
        store.save(make_record(company_name="Acme Corp"))
        store.save(make_record(company_name="Globex"))
        (store.records_dir / "broken-invoice.json").write_text("{oops", encoding="utf-8")

        result = service.render_all()

        assert sorted(p.name for p in result.generated) == ["acme-corp-invoice.pdf", "globex-invoice.pdf"]
        assert len(result.errors) == 1
        assert result.errors[0].startswith("broken-invoice.json")
        assert not (output_dir / "broken-invoice.pdf").exists()

    def test_render_failure_does_not_stop_the_batch(self, store, output_dir, seller, make_record, make_strategy):
        strategy = make_strategy(fail_for={"bad"})
        service = InvoiceService(store, RendererAdapter(strategy, output_dir), seller)
        store.save(make_record(company_name="One", customer_id="ok-1"))
        store.save(make_record(company_name="Two", customer_id="bad"))
        store.save(make_record(company_name="Three", customer_id="ok-2"))

        result = service.render_all()

        assert len(result.generated) == 2
        assert len(result.errors) == 1
        assert "two-invoice.json" in result.errors[0]
        assert sorted(store.list()) == ["one-invoice.json", "three-invoice.json", "two-invoice.json"]

    def test_empty_directory(self, recording_service):
        result = recording_service.render_all()
        assert result.generated == []
        assert result.errors == []


class TestFromSettings:

    def test_seller_config_and_format(self, tmp_path):
        seller = [{"label": "From", "value": ["Jane Consulting", "2 High Street"]}]
        (tmp_path / "seller.json").write_text(json.dumps(seller), encoding="utf-8")
        settings = AppSettings.from_root(tmp_path, currency="€", render_format="xlsx")

        service = InvoiceService.from_settings(settings)

        assert service.seller[0].value == ["Jane Consulting", "2 High Street"]
        assert service.currency == "€"
        assert isinstance(service.renderer.strategy, XlsxRenderStrategy)
        assert service.store.records_dir == tmp_path / "invoices"

    def test_invalid_seller_config(self, tmp_path):
        (tmp_path / "seller.json").write_text("{", encoding="utf-8")
        with pytest.raises(InvalidSellerConfig):
            InvoiceService.from_settings(AppSettings.from_root(tmp_path))

    def test_prepare_creates_directories(self, tmp_path):
        service = InvoiceService.from_settings(AppSettings.from_root(tmp_path))
        service.prepare()
        assert (tmp_path / "invoices").is_dir()
        assert (tmp_path / "generated_invoices").is_dir()
