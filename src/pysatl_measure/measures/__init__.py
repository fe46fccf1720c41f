"""
Measures subpackage

Probability measures as integration functionals and their algebra:

- the measure type and its constructors (:mod:`.measure`);
- pipeable queries, functor/applicative/monad operations and do notation
  (:mod:`.operations`);
- value-level algebras (:mod:`.algebra`) and their liftings to measures
  (:mod:`.instances`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .algebra import (
    Field,
    Monoid,
    NumberField,
    NumberMonoidProduct,
    NumberMonoidSum,
    NumberSemigroupSum,
    Semigroup,
)
from .instances import (
    FieldNumber,
    MonoidProduct,
    MonoidSum,
    SemigroupSum,
    concat_all,
    get_field,
    get_monoid,
    get_semigroup,
)
from .measure import (
    Measure,
    from_density_function,
    from_mass_function,
    from_sample,
    of,
    pure,
)
from .operations import (
    Record,
    ap,
    ap_first,
    ap_s,
    ap_second,
    bind,
    bind_to,
    central_moment,
    chain,
    do,
    expectation,
    flatten,
    identity,
    integrate,
    kurtosis,
    lift_a2,
    map,
    moment,
    moment_generating_function,
    pipe,
    skewness,
    standard_deviation,
    total_mass,
    variance,
)

__all__ = [
    # model and constructors
    "Measure",
    "from_density_function",
    "from_mass_function",
    "from_sample",
    "of",
    "pure",
    # elimination
    "integrate",
    "expectation",
    "variance",
    "moment_generating_function",
    "total_mass",
    "moment",
    "central_moment",
    "standard_deviation",
    "skewness",
    "kurtosis",
    # combinators
    "map",
    "chain",
    "flatten",
    "ap",
    "lift_a2",
    "ap_first",
    "ap_second",
    "pipe",
    "identity",
    # do notation
    "Record",
    "do",
    "bind_to",
    "bind",
    "ap_s",
    # algebras
    "Semigroup",
    "Monoid",
    "Field",
    "NumberSemigroupSum",
    "NumberMonoidSum",
    "NumberMonoidProduct",
    "NumberField",
    "get_semigroup",
    "get_monoid",
    "get_field",
    "concat_all",
    "SemigroupSum",
    "MonoidSum",
    "MonoidProduct",
    "FieldNumber",
]
