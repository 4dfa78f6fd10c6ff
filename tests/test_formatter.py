from collections.abc import Callable

from failure import (
    Message,
    MessageKV,
    StringCode,
    call_stack_of,
    custom,
    new,
    short,
    translate,
    verbose,
    wrap,
)

CODE_A = StringCode("code_a")
CODE_B = StringCode("code_b")

PKG = __name__.rpartition(".")[2]


def test_short_format() -> None:
    e1 = ValueError("yyy")
    e2 = translate(e1, CODE_A, Message("xxx"), MessageKV(zzz="true"))
    err = wrap(e2)

    fn = f"{PKG}.test_short_format"
    want = f"{fn}: {fn}: xxx: zzz=true: code(code_a): yyy"
    assert short(err) == want
    assert str(err) == want
    assert f"{err}" == want


def test_short_new_then_translate() -> None:
    base = new(CODE_A, Message("xxx"), MessageKV({"zzz": "true"}))
    err = translate(base, CODE_B)

    fn = f"{PKG}.test_short_new_then_translate"
    assert short(err) == f"{fn}: code(code_b): {fn}: xxx: zzz=true: code(code_a)"


def test_short_custom_is_foreign_string() -> None:
    assert short(custom(EOFError("EOF"))) == "EOF"


def test_short_has_no_stray_separators() -> None:
    err = custom(custom(EOFError("EOF")))
    assert short(err) == "EOF"
    assert short(custom(EOFError())) == ""


def test_short_foreign_error_without_text_contributes_nothing() -> None:
    err = wrap(EOFError())
    assert short(err) == f"{PKG}.test_short_foreign_error_without_text_contributes_nothing"


def test_short_none_and_plain_foreign() -> None:
    assert short(None) == ""
    assert short(ValueError("plain")) == "plain"


def test_short_includes_foreign_links_in_order() -> None:
    try:
        raise RuntimeError("outer") from new(CODE_A)
    except RuntimeError as exc:
        err = wrap(exc)

    fn = f"{PKG}.test_short_includes_foreign_links_in_order"
    assert short(err) == f"{fn}: outer: {fn}: code(code_a)"


def test_verbose_format(here: Callable[[], tuple[str, int]]) -> None:
    e1 = ValueError("yyy")
    e2, (path, line2) = translate(e1, CODE_A, Message("xxx"), MessageKV(zzz="true")), here()
    err, (_, line1) = wrap(e2), here()

    fn = f"{PKG}.test_verbose_format"
    lines = verbose(err).split("\n")
    assert lines[:8] == [
        f"[{fn}] {path}:{line1}",
        f"[{fn}] {path}:{line2}",
        '    message("xxx")',
        "    zzz = true",
        "    code(code_a)",
        "    ValueError('yyy')",
        "[CallStack]",
        f"    [{fn}] {path}:{line1}",
    ]
    stack, _ = call_stack_of(err)
    assert lines[7:] == [f"    {frame}" for frame in stack]


def test_verbose_message_is_double_quoted_and_escaped() -> None:
    err = new(CODE_A, Message('say "hi"\nnaïve'))
    lines = verbose(err).split("\n")
    assert lines[1] == '    message("say \\"hi\\"\\nnaïve")'


def test_verbose_debug_insertion_order() -> None:
    err = new(CODE_A, MessageKV(zeta="1", alpha="2"))
    lines = verbose(err).split("\n")
    assert lines[1:4] == ["    zeta = 1", "    alpha = 2", "    code(code_a)"]


def test_verbose_without_call_stack() -> None:
    assert verbose(custom(EOFError("EOF"))) == "    EOFError('EOF')"
    assert verbose(None) == ""


def test_formatting_is_idempotent() -> None:
    err = translate(wrap(new(CODE_A, Message("m"), MessageKV(k="v"))), CODE_B)
    assert short(err) == short(err)
    assert verbose(err) == verbose(err)
    assert str(err) == str(err)
