from __future__ import annotations

from typing import Callable, Dict, List, Optional

from tree_sitter import Node, Tree

from .model import ImportKind, ImportRecord, ImportTable
from .ts_parse import iter_nodes, node_text


def _module_specifier(node: Node) -> Optional[str]:
	source = node.child_by_field_name("source")
	if source is None or source.type != "string":
		return None
	# Strip the surrounding quotes.
	return node_text(source)[1:-1]


def _has_type_keyword(node: Node) -> bool:
	return any(not c.is_named and c.type in ("type", "typeof") for c in node.children)


def _specifier_local_name(spec: Node) -> str:
	alias = spec.child_by_field_name("alias")
	if alias is not None:
		return node_text(alias)
	return node_text(spec.child_by_field_name("name"))


def _clause_records(module: str, clause: Node, type_only: bool) -> List[ImportRecord]:
	records: List[ImportRecord] = []
	for child in clause.named_children:
		if child.type == "identifier":
			records.append(ImportRecord(module=module, kind=ImportKind.DEFAULT, names=[node_text(child)]))
		elif child.type == "namespace_import":
			alias = [node_text(c) for c in child.named_children if c.type == "identifier"]
			records.append(ImportRecord(module=module, kind=ImportKind.NAMESPACE, names=alias))
		elif child.type == "named_imports":
			for spec in child.named_children:
				if spec.type != "import_specifier":
					continue
				kind = ImportKind.TYPE_ONLY if type_only or _has_type_keyword(spec) else ImportKind.NAMED
				records.append(ImportRecord(module=module, kind=kind, names=[_specifier_local_name(spec)]))
	return records


def _visit_import_statement(node: Node, table: ImportTable) -> None:
	module = _module_specifier(node)
	if module is None:
		return
	table.add_module(module)
	type_only = _has_type_keyword(node)
	for child in node.named_children:
		if child.type == "import_clause":
			for record in _clause_records(module, child, type_only):
				table.add(record)


_HANDLERS: Dict[str, Callable[[Node, ImportTable], None]] = {
	"import_statement": _visit_import_statement,
}


def extract_imports(tree: Tree, table: Optional[ImportTable] = None) -> ImportTable:
	"""Collect every import declaration in the tree, at any depth."""
	if table is None:
		table = ImportTable()
	for node in iter_nodes(tree.root_node):
		handler = _HANDLERS.get(node.type)
		if handler is not None:
			handler(node, table)
	return table
