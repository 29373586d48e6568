"""Registry of special forms for the Sprig evaluator.

Maps builtin names to handlers that receive their argument expressions
unevaluated. The root environment binds each of these as a SPECIAL_FORM
function, so the evaluator skips argument evaluation for them.
"""

from sprig.evaluation.special_forms.def_form import def_form
from sprig.evaluation.special_forms.defn_form import defn_form
from sprig.evaluation.special_forms.do_form import do_form
from sprig.evaluation.special_forms.if_form import if_form
from sprig.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "def": def_form,
    "defn": defn_form,
    "do": do_form,
    "if": if_form,
    "lambda": lambda_form,
}
