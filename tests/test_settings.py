"""
Settings defaults and seed-file overrides.
"""
from dataclasses import fields

from checkout_tool.config.settings import Settings, get_data_dir, get_settings
from checkout_tool.data.load_store import load_store


def test_defaults_point_at_bundled_seed_files():
    settings = Settings.load()
    assert settings.catalog_csv == get_data_dir() / "catalog.csv"
    assert settings.catalog_csv.is_file()
    assert settings.stock_csv.is_file()
    assert (settings.api_port, settings.ui_port) == (8000, 8501)


def test_every_setting_is_consumed():
    assert [f.name for f in fields(Settings)] == ["catalog_csv", "stock_csv", "api_host", "api_port", "ui_port"]


def test_data_dir_override(tmp_path):
    (tmp_path / "catalog.csv").write_text(
        "sku,name,price,manufacturer,category,max_installments\n"
        "LAMP,Lamp,45.00,Acme,decor,4\n"
    )
    (tmp_path / "stock.csv").write_text("sku,quantity\nLAMP,2\n")

    catalog, inventory, report = load_store(Settings.load(data_dir=tmp_path))

    assert catalog.skus() == ["LAMP"]
    assert inventory.get_quantity("LAMP") == 2
    assert report["input_files"]["catalog"]["path"] == str(tmp_path / "catalog.csv")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_run_app_launches_packaged_ui_on_configured_port(monkeypatch):
    import importlib.util
    from pathlib import Path

    script = Path(__file__).resolve().parent.parent / "scripts" / "run_app.py"
    spec = importlib.util.spec_from_file_location("run_app", script)
    run_app = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(run_app)

    calls = []
    monkeypatch.setattr(run_app.subprocess, "run", lambda cmd, **kwargs: calls.append(cmd))
    run_app.main()

    (cmd,) = calls
    assert cmd[1:4] == ["-m", "streamlit", "run"]
    assert cmd[4].endswith("app_streamlit.py")
    assert Path(cmd[4]).is_file()
    assert cmd[-2:] == ["--server.port", "8501"]
