from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from tree_sitter import Node, Tree

from .config import DEFAULT_CONFIG, ExtractorConfig
from .model import CallKind, CallRecord, CallSet
from .ts_parse import iter_nodes, node_text


def classify_call(name: str, config: ExtractorConfig = DEFAULT_CONFIG) -> CallKind:
	"""Classify a call whose callee is a plain identifier."""
	if name.startswith(config.hook_prefix):
		return CallKind.HOOK
	# withX is always kept, even when X alone would be excluded.
	if name.startswith(config.function_prefix):
		return CallKind.FUNCTION
	if name in config.excluded_functions:
		return CallKind.IGNORED
	return CallKind.FUNCTION


def classify_member_call(namespace: str, member: str, config: ExtractorConfig = DEFAULT_CONFIG) -> CallKind:
	"""Classify a call of the form namespace.member(...)."""
	if namespace == config.animation_namespace:
		return CallKind.COMPONENT
	if member in config.excluded_functions:
		return CallKind.IGNORED
	return CallKind.FUNCTION


def _member_parts(node: Node) -> Optional[Tuple[str, str]]:
	"""Split X.M into (X, M) when X is a plain identifier."""
	if node.type == "member_expression":
		obj = node.child_by_field_name("object")
		prop = node.child_by_field_name("property")
		if obj is None or prop is None or obj.type != "identifier":
			return None
		if prop.type != "property_identifier":
			return None
		return node_text(obj), node_text(prop)
	if node.type == "nested_identifier":
		# Older grammars emit <A.B> tags as nested_identifier.
		parts = node.named_children
		if len(parts) == 2 and parts[0].type == "identifier":
			return node_text(parts[0]), node_text(parts[1])
	return None


class CallVisitor:
	"""Feeds call expressions and JSX tags of one tree into a CallSet."""

	def __init__(self, config: ExtractorConfig = DEFAULT_CONFIG):
		self.config = config
		self._handlers: Dict[str, Callable[[Node, CallSet], None]] = {
			"call_expression": self._visit_call,
			"jsx_opening_element": self._visit_jsx_element,
			"jsx_self_closing_element": self._visit_jsx_element,
		}

	def visit(self, tree: Tree, calls: CallSet) -> CallSet:
		for node in iter_nodes(tree.root_node):
			handler = self._handlers.get(node.type)
			if handler is not None:
				handler(node, calls)
		return calls

	def _visit_call(self, node: Node, calls: CallSet) -> None:
		args = node.child_by_field_name("arguments")
		if args is not None and args.type == "template_string":
			# Tagged template, e.g. styled.View`...`
			return
		callee = node.child_by_field_name("function")
		if callee is None:
			return

		if callee.type == "identifier":
			name = node_text(callee)
			calls.add(CallRecord(name=name, kind=classify_call(name, self.config)))
			return

		parts = _member_parts(callee)
		if parts is None:
			return
		namespace, member = parts
		calls.add_namespace_call(namespace, member)
		kind = classify_member_call(namespace, member, self.config)
		calls.add(CallRecord(name=f"{namespace}.{member}", kind=kind))

	def _visit_jsx_element(self, node: Node, calls: CallSet) -> None:
		tag = node.child_by_field_name("name")
		if tag is None:
			return
		if tag.type == "identifier":
			calls.add(CallRecord(name=node_text(tag), kind=CallKind.COMPONENT))
			return
		parts = _member_parts(tag)
		if parts is not None:
			calls.add(CallRecord(name=".".join(parts), kind=CallKind.COMPONENT))


def extract_calls(tree: Tree, config: ExtractorConfig = DEFAULT_CONFIG, calls: Optional[CallSet] = None) -> CallSet:
	if calls is None:
		calls = CallSet()
	return CallVisitor(config).visit(tree, calls)
