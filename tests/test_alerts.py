import shopauth.ui.alerts as alerts_module


def test_present_error_shows_modal_then_acknowledges(monkeypatch):
    calls = []
    monkeypatch.setattr(
        alerts_module.messagebox,
        "showerror",
        lambda title, message, parent=None: calls.append(("shown", title, message, parent)),
    )
    root = object()

    alert = alerts_module.MessageBoxAlert("Lỗi xảy ra!", parent=root)
    alert.present_error("Invalid credentials", lambda: calls.append(("ack",)))

    assert calls == [("shown", "Lỗi xảy ra!", "Invalid credentials", root), ("ack",)]
