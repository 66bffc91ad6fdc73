"""
Tests for the page loader and the shipped content pages, rendered end to end
through the layout shell over the real page directory.
"""

import io
import sys

import pytest

from oopshowcase.errors import InvalidPage, PageNotFound
from oopshowcase.pages import MODULE_PREFIX, load_page
from oopshowcase.registry import ExampleRegistry, FilesystemListing
from oopshowcase.shell import LayoutShell


def render_page(pages_dir, file_name):
    page = load_page(pages_dir, file_name)
    shell = LayoutShell(ExampleRegistry(FilesystemListing(pages_dir)))
    out = io.StringIO()
    shell.write(out, page.render, page.title)
    return out.getvalue()


def test_load_page(pages_dir):
    page = load_page(pages_dir, "practical_exe_02.py")

    assert page.file_name == "practical_exe_02.py"
    assert page.title is None
    assert callable(page.render)
    assert f"{MODULE_PREFIX}.practical_exe_02" in sys.modules


def test_index_title(pages_dir):
    assert load_page(pages_dir, "index.py").title == "Practical Exercise"


def test_pages_load_fresh_each_time(pages_dir):
    first = load_page(pages_dir, "practical_exe_01.py")
    second = load_page(pages_dir, "practical_exe_01.py")
    assert first.render is not second.render


@pytest.mark.parametrize("file_name", [
    "missing.py",
    "header.py",
    "Sidebar.py",
    "index.txt",
    "../pages/index.py",
    "sub\\index.py",
    ".hidden.py",
    "",
])
def test_page_not_found(pages_dir, file_name):
    with pytest.raises(PageNotFound):
        load_page(pages_dir, file_name)


def test_page_without_render(tmp_path):
    (tmp_path / "broken.py").write_text("VALUE = 1\n")
    with pytest.raises(InvalidPage):
        load_page(tmp_path, "broken.py")


def test_page_import_error_is_not_swallowed(tmp_path):
    (tmp_path / "crash.py").write_text("raise RuntimeError('import failed')\n")
    with pytest.raises(RuntimeError, match="import failed"):
        load_page(tmp_path, "crash.py")
    assert f"{MODULE_PREFIX}.crash" not in sys.modules


def test_menu_lists_every_exercise(pages_dir):
    html = render_page(pages_dir, "index.py")

    for n in ["01", "02", "03", "04", "05", "06", "07", "08", "10", "11", "12", "13", "14", "15", "16", "17"]:
        assert f'href="practical_exe_{n}.py"' in html
        assert f"PRACTICAL EXE {n}" in html
    assert "HOME" in html


@pytest.mark.parametrize("file_name, expected", [
    ("index.py", ["Object-Oriented Programming Exercises"]),
    ("practical_exe_01.py", ["New Account created with Initial Balance: 1000",
                             "Deposited: 500. New Balance: 1500",
                             "Withdrawn: 200. Remaining Balance: 1300",
                             "Final Balance: 1300"]),
    ("practical_exe_02.py", ["Car Details: 2018 Toyota Corolla"]),
    ("practical_exe_03.py", ["Car Details: 2018 Toyota Corolla",
                             "Car Details: 2019 Honda Civic",
                             "Car Details: 2020 Suzuki Swift",
                             "Car Details: 2021 Hyundai Accent"]),
    ("practical_exe_04.py", ["Car Details: 2018 Toyota Corolla Red",
                             "Car Details: 2019 Honda Civic Blue",
                             "Vehicle Details: 2018 Toyota Corolla",
                             "Vehicle Details: 2019 Honda Civic"]),
    ("practical_exe_05.py", ["<p>60</p>", "<p>200</p>", "Invalid number of arguments"]),
    ("practical_exe_06.py", ["Car is starting...", "Car is stopping...",
                             "Heavy vehicle starting ...", "Heavy vehicle stopping ..."]),
    ("practical_exe_07.py", ["<p>Toyota</p>", "<p>Corolla</p>", "<p>Maruti</p>", "<p>Swift</p>"]),
    ("practical_exe_10.py", ["<p>Hello</p>", "Hello, World!", "HELLO, WORLD!"]),
    ("practical_exe_11.py", ["Hello from Trait A", "Hello from Trait B"]),
    ("practical_exe_12.py", ["This is a public property", "This is a protected property",
                             "This is a private property", "This is a public method",
                             "This is a protected method", "This is a private method",
                             "Parent Class", "Child Class"]),
    ("practical_exe_13.py", ["No_ : 1", "Name : Tom", "Phone Number : 9998887777",
                             "Weight : 65.84 kg", "Height : 143.29 cms",
                             "Weight : 58.0 kg", "Rejected: invalid id, phone"]),
    ("practical_exe_14.py", ["This is a method from final class",
                             "changes with child class of a final class",
                             "Cannot extend final class RestClass"]),
    ("practical_exe_15.py", ["Failed to send email."]),
    ("practical_exe_16.py", ["File Content", "Object-Oriented Programming Exercises"]),
    ("practical_exe_17.py", ["Email sending failed."]),
])
def test_page_output(pages_dir, file_name, expected):
    html = render_page(pages_dir, file_name)
    for text in expected:
        assert text in html
    assert "<footer>" in html


def test_destructor_order(pages_dir):
    html = render_page(pages_dir, "practical_exe_08.py")
    lines = ["Database connection established.", "Database connection closed.",
             "Cache initialized.", "Cache cleared."]
    positions = [html.index(line) for line in lines]
    assert positions == sorted(positions)


def test_overloads_by_arity(pages_dir):
    load_page(pages_dir, "practical_exe_05.py")
    adder = sys.modules[f"{MODULE_PREFIX}.practical_exe_05"].AddNumbers()

    assert adder.add(1, 2) == 3
    assert adder.add(1, 2, 3) == 6
    assert adder.add(1, 2, 3, 4) == 10
    assert adder.add(1) == "Invalid number of arguments"
    assert not hasattr(adder, "subtract")


def test_private_members_are_name_mangled(pages_dir):
    load_page(pages_dir, "practical_exe_12.py")
    module = sys.modules[f"{MODULE_PREFIX}.practical_exe_12"]
    child = module.MyChildClass()

    assert child._MyClass__prop_private == "This is a private property"
    assert "has no attribute __prop_private" in module.private_access(child)


def test_email_page_sends_when_configured(pages_dir, offline_mailer, monkeypatch):
    sent = []
    monkeypatch.setattr(offline_mailer, "send", lambda to, subject, message, headers=None: sent.append(to) or True)

    html = render_page(pages_dir, "practical_exe_15.py")

    assert "Email sent successfully to test@example.com." in html
    assert sent == ["test@example.com"]


def test_safe_email_rejections(pages_dir):
    load_page(pages_dir, "practical_exe_15.py")
    send_safe_email = sys.modules[f"{MODULE_PREFIX}.practical_exe_15"].send_safe_email

    assert send_safe_email("not an email", "Hi", "body") == "Invalid email format."
    assert send_safe_email("user@example.com", "Hi\r\nBcc: x@example.com", "body") == \
        "Email headers contain invalid characters."
