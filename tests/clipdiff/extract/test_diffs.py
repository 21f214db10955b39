import textwrap

from clipdiff.extract.diffs import get_diff_target_path, is_likely_unified_diff, strip_header_path


def test_is_likely_unified_diff_hunk_header():
    assert is_likely_unified_diff("@@ -1,2 +1,2 @@\n a\n-b\n+c")

def test_is_likely_unified_diff_hunk_header_later_in_text():
    assert is_likely_unified_diff("some notes\n@@ -3 +3 @@\n-x\n+y")

def test_is_likely_unified_diff_file_headers_only():
    assert is_likely_unified_diff("--- a/x.py\n+++ b/x.py\n")

def test_is_likely_unified_diff_crlf_headers():
    assert is_likely_unified_diff("--- a/x.py\r\n+++ b/x.py\r\n")

def test_is_likely_unified_diff_rejects_prose():
    assert not is_likely_unified_diff("Just a regular message.")
    assert not is_likely_unified_diff("inline @@ -1 +1 @@ mention")
    assert not is_likely_unified_diff("")
    assert not is_likely_unified_diff(None)

def test_get_diff_target_path_prefers_new_path():
    diff = textwrap.dedent("""\
    --- a/src/old_name.py
    +++ b/src/new_name.py
    @@ -1 +1 @@
    -a
    +b
    """)
    assert get_diff_target_path(diff) == "src/new_name.py"

def test_get_diff_target_path_without_headers():
    assert get_diff_target_path("@@ -1 +1 @@\n-a\n+b\n") is None
    assert get_diff_target_path("") is None

def test_get_diff_target_path_crlf():
    assert get_diff_target_path("--- a/x.txt\r\n+++ b/x.txt\r\n") == "x.txt"

def test_strip_header_path_timestamp():
    assert strip_header_path("b/lib/util.c\t2024-01-01 10:00:00.000000000 +0000") == "lib/util.c"

def test_strip_header_path_annotation():
    assert strip_header_path("new.py  (working copy)") == "new.py"

def test_strip_header_path_quotes():
    assert strip_header_path('"b/my file.py"') == "my file.py"
    assert strip_header_path("'a/x.py'") == "x.py"

def test_strip_header_path_plain():
    assert strip_header_path("docs/readme.md") == "docs/readme.md"
