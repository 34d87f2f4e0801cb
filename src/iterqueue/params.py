from abc import ABC, abstractmethod
from enum import Enum
from shlex import shlex
from typing import Any, Generic, Iterable, Iterator, Tuple, Type, TypeVar

_E = TypeVar('_E', bound=Enum)

"""
User args are a comma-separated list of name=value pairs, e.g.

order=ascending
order = Descending
"""


class Field(ABC):
	def __init__(self, name: str) -> None:
		self._name: str = name

	@property
	def name(self) -> str:
		return self._name

	@abstractmethod
	def convert(self, raw: str) -> Any:
		"""Interprets the raw value text following `name=`.
		"""
		raise NotImplementedError


class EnumField(Generic[_E], Field):
	"""Field whose value is the name of a member of enum_cls.

	Member names are matched case-insensitively.
	"""
	def __init__(self, name: str, enum_cls: Type[_E]) -> None:
		super(EnumField, self).__init__(name)
		self._enum_cls: Type[_E] = enum_cls

	def convert(self, raw: str) -> _E:
		for member in self._enum_cls:
			if member.name.lower() == raw.lower():
				return member

		choices = ', '.join(member.name.lower() for member in self._enum_cls)
		raise ValueError(f'invalid value {raw!r} for {self.name!r}, choose from: {choices}')


def parse_user_args(user_args: str, dest: Any, fields: Iterable[Field]) -> None:
	"""Parse user args according to fields and store values in dest.

	Names not listed in fields and malformed pairs raise ValueError.
	"""
	fields_dict = dict((field.name, field) for field in fields)

	for name, raw in _pairs(user_args):
		if name not in fields_dict:
			raise ValueError(f'unknown name {name!r}')
		setattr(dest, name, fields_dict[name].convert(raw))

def _pairs(user_args: str) -> Iterator[Tuple[str, str]]:
	lex = shlex(user_args, posix=True)

	tok = lex.get_token()
	while tok != lex.eof:
		name = tok

		tok = lex.get_token()
		if tok != '=':
			raise ValueError(f'expected \'=\' after {name!r}, got {tok!r}')

		value_toks = list(_tokens_until_comma(lex))
		if len(value_toks) != 1:
			raise ValueError(f'expected a single value for {name!r}, got {value_toks!r}')

		yield name, value_toks[0]

		tok = lex.get_token()
		if tok == lex.eof:
			break
		elif tok != ',':
			raise ValueError(f'expected \',\', got {tok!r}')

		tok = lex.get_token()
		if tok == lex.eof:
			raise ValueError('trailing \',\'')

def _tokens_until_comma(lex: shlex) -> Iterator[str]:
	while True:
		tok = lex.get_token()
		if tok == lex.eof:
			return
		elif tok == ',':
			lex.push_token(tok)
			return
		else:
			yield tok
