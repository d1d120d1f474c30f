"""Registry of special forms for the iota evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application.
"""

from iota.types.symbol import Symbol
from iota.evaluation.special_forms.quote_forms import quote_form
from iota.evaluation.special_forms.if_form import if_form
from iota.evaluation.special_forms.cond_form import cond_form
from iota.evaluation.special_forms.set_form import set_form
from iota.evaluation.special_forms.define_form import define_form
from iota.evaluation.special_forms.lambda_form import lambda_form
from iota.evaluation.special_forms.progn_form import progn_form
from iota.evaluation.special_forms.let_form import let_form
from iota.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("cond"): cond_form,
    Symbol("set!"): set_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): progn_form,
    Symbol("let"): let_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
}
