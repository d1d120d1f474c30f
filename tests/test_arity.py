import pytest

from iota.errors import IotaArityError
from iota.types.unspecified import Unspecified


@pytest.mark.parametrize("source", ["((lambda (x y) x) 1)", "((lambda (x) x) 1 2)", "((lambda () 1) 1)"])
def test_strict_arity_by_default(interp, source):
    with pytest.raises(IotaArityError):
        interp.eval(source)


@pytest.mark.parametrize("flag", ["1", "true", "yes", ""])
def test_strict_arity_flag_values(interp, monkeypatch, flag):
    monkeypatch.setenv("IOTA_STRICT_ARITY", flag)
    with pytest.raises(IotaArityError):
        interp.eval("((lambda (x) x))")


@pytest.mark.parametrize("flag", ["0", "false", "no", "OFF"])
def test_lax_arity_pads_and_truncates(interp, monkeypatch, flag):
    monkeypatch.setenv("IOTA_STRICT_ARITY", flag)
    assert interp.eval("((lambda (x y) x) 1 2 3)") == 1
    assert interp.eval("((lambda (x y) y) 1)") is Unspecified
