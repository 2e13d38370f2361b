from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Number
from typing import override

###############################################################################
# JS AST
###############################################################################


class JSNode(ABC):
	@abstractmethod
	def emit(self) -> str:
		raise NotImplementedError


class JSExpr(JSNode, ABC):
	"""Base class for JavaScript expressions.

	Nodes render with the punctuation Prototype helpers have always produced,
	so spacing differs slightly between node types (for example object
	literals and compact function definitions). Do not normalize it.
	"""


class JSStmt(JSNode, ABC):
	pass


@dataclass
class JSIdentifier(JSExpr):
	name: str

	@override
	def emit(self) -> str:
		return self.name


@dataclass
class JSRaw(JSExpr):
	"""Caller-provided JavaScript, emitted as is."""

	content: str

	@override
	def emit(self) -> str:
		return self.content


@dataclass
class JSString(JSExpr):
	"""Single-quoted string literal.

	The value is emitted between quotes without further escaping. Run it
	through `escape_javascript` first when it may contain quotes.
	"""

	value: str

	@override
	def emit(self) -> str:
		return f"'{self.value}'"


@dataclass
class JSNumber(JSExpr):
	value: int | float

	@override
	def emit(self) -> str:
		return str(self.value)


@dataclass
class JSBoolean(JSExpr):
	value: bool

	@override
	def emit(self) -> str:
		return "true" if self.value else "false"


@dataclass
class JSMember(JSExpr):
	obj: JSExpr
	prop: str

	@override
	def emit(self) -> str:
		return f"{self.obj.emit()}.{self.prop}"


@dataclass
class JSProp(JSNode):
	key: str
	value: JSExpr

	@override
	def emit(self) -> str:
		return f"{self.key}:{self.value.emit()}"


@dataclass
class JSObjectExpr(JSExpr):
	props: Sequence[JSProp]
	separator: str = ", "

	@override
	def emit(self) -> str:
		return "{" + self.separator.join(p.emit() for p in self.props) + "}"


@dataclass
class JSBinary(JSExpr):
	left: JSExpr
	op: str
	right: JSExpr

	@override
	def emit(self) -> str:
		return f"{self.left.emit()} {self.op} {self.right.emit()}"


@dataclass
class JSCall(JSExpr):
	callee: JSExpr
	args: Sequence[JSExpr]

	@override
	def emit(self) -> str:
		return f"{self.callee.emit()}({', '.join(a.emit() for a in self.args)})"


@dataclass
class JSNew(JSExpr):
	ctor: JSExpr
	args: Sequence[JSExpr]

	@override
	def emit(self) -> str:
		return f"new {self.ctor.emit()}({', '.join(a.emit() for a in self.args)})"


@dataclass
class JSFunctionDef(JSExpr):
	"""Anonymous function whose body is a single inline statement.

	`compact` drops the space between the parameter list and the body, which
	is how Ajax option callbacks (`function(request){...}`) are written.
	"""

	params: Sequence[str]
	body: JSNode
	compact: bool = False

	@override
	def emit(self) -> str:
		params = ", ".join(self.params)
		gap = "" if self.compact else " "
		return f"function({params}){gap}{{{self.body.emit()}}}"


@dataclass
class JSMultiStmt(JSStmt):
	stmts: Sequence[JSNode]

	@override
	def emit(self) -> str:
		return "; ".join(s.emit() for s in self.stmts)


@dataclass
class JSIf(JSStmt):
	test: JSExpr
	body: JSNode

	@override
	def emit(self) -> str:
		return f"if ({self.test.emit()}) {{ {self.body.emit()}; }}"


def js_path(dotted: str) -> JSExpr:
	"""Build a member chain from a dotted name: `Form.Element.Observer`."""
	head, *rest = dotted.split(".")
	expr: JSExpr = JSIdentifier(head)
	for prop in rest:
		expr = JSMember(expr, prop)
	return expr


def to_js_expr(value: object) -> JSExpr:
	"""Convert a Python value to a JSExpr.

	Strings are treated as JavaScript source, not as string literals: option
	values such as frequencies or `with` expressions are code fragments.
	"""
	if isinstance(value, JSExpr):
		return value
	if isinstance(value, str):
		return JSRaw(value)
	# bool before int, bool is a subclass of int
	if isinstance(value, bool):
		return JSBoolean(value)
	if isinstance(value, (int, float)):
		return JSNumber(value)
	# Decimal, Fraction and other numeric types render through str()
	if isinstance(value, Number):
		return JSRaw(str(value))
	raise TypeError(f"Cannot convert {type(value).__name__} to JSExpr")
