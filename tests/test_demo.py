import json

from disposal.scripts import demo


def messages(caplog) -> list[str]:
    return [r.getMessage() for r in caplog.records]


def test_demo_disposes_explicitly(closer, debug_logs, monkeypatch):
    monkeypatch.setattr(demo, 'acquire_waitable_handle', lambda: 0x10)
    monkeypatch.setattr('disposal.resource.wrapper.default_closer', lambda: closer)
    demo.main(['--verbose'])
    logged = messages(debug_logs)
    assert logged.index('Bystander instance created') < logged.index('Bystander instance destroyed')
    assert logged.index('Bystander instance destroyed') < logged.index('ResourceWrapper created')
    assert 'ResourceWrapper.dispose()' in logged
    assert 'ResourceWrapper finalizer running' not in logged
    assert closer.calls == [0x10]


def test_demo_falls_back_to_finalizer(closer, debug_logs, monkeypatch):
    monkeypatch.setattr(demo, 'acquire_waitable_handle', lambda: 0x11)
    monkeypatch.setattr('disposal.resource.wrapper.default_closer', lambda: closer)
    demo.main(['--skip-dispose'])
    logged = messages(debug_logs)
    assert 'ResourceWrapper.dispose()' not in logged
    assert 'ResourceWrapper finalizer running' in logged
    assert closer.calls == [0x11]


def test_demo_reads_release_policy(failing_closer, monkeypatch, tmp_path, caplog):
    config_file = tmp_path / 'policy.json'
    config_file.write_text(json.dumps({'on_explicit_failure': 'log'}), encoding='utf-8')
    monkeypatch.setattr(demo, 'acquire_waitable_handle', lambda: 0x12)
    monkeypatch.setattr('disposal.resource.wrapper.default_closer', lambda: failing_closer)
    demo.main(['--release-policy', str(config_file)])
    assert failing_closer.calls == [0x12]
    assert any('explicit context' in m for m in messages(caplog))
