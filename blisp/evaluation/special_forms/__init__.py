"""Registry of special forms for the blisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table, by the literal head symbol, before ordinary
function application. Every handler has the signature

    handler(tail, env, evaluate_fn) -> Result

where `tail` is the tuple of operand forms following the keyword.
"""

from blisp.types import Symbol
from blisp.evaluation.special_forms.let_form import let_form
from blisp.evaluation.special_forms.if_form import if_form
from blisp.evaluation.special_forms.lambda_form import lambda_form
from blisp.evaluation.special_forms.set_form import set_form

SPECIAL_FORMS = {
    Symbol("let"): let_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
    Symbol("set!"): set_form,
}
