import numpy as np

from collections.abc import Mapping


class Checks(object):
    @classmethod
    def _is_mapping(class_, input_):
        return isinstance(input_, Mapping)

    @classmethod
    def _is_1D_numeric(class_, input_):
        return class_._is_numeric(input_) and input_.ndim == 1

    @classmethod
    def _is_string_or_none(class_, input_):
        return any((class_._is_string(input_), class_._is_none(input_)))

    @staticmethod
    def _is_numeric(input_):
        return np.issubdtype(input_.dtype, np.number) and not np.issubdtype(
            input_.dtype, np.complexfloating
        )

    @staticmethod
    def _is_string(input_):
        return isinstance(input_, str)

    @staticmethod
    def _is_none(input_):
        return input_ is None

    @staticmethod
    def _is_ascii(input_):
        return str(input_).isascii()

    @staticmethod
    def _raise_type_error(input_, type_):
        raise TypeError("%s must be %s." % (input_, type_))

    @staticmethod
    def _raise_length_error(input_, expected):
        raise ValueError("%s must have length %s." % (input_, expected))
