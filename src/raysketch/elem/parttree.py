#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2021 Michael J. Hayford
"""Render the element hierarchy as a tree.

The element model keeps the hierarchy as id references. This module builds
a transient anytree representation of it for listing and export.

.. Created on Sat Jan 23 20:15:48 2021

.. codeauthor: Michael J. Hayford
"""
from anytree import Node, RenderTree
from anytree.exporter import DictExporter


def build_part_tree(ele_model):
    """ Return a root Node with a subtree for each root element. """
    root_node = Node('root', id=None, tag='#group#root')

    stack = [(e, root_node) for e in reversed(ele_model.roots())]
    while stack:
        e, parent_node = stack.pop()
        tag = '#element#hidden' if not e.visible else '#element'
        node = Node(e.label, id=e.ele_id, tag=tag, parent=parent_node)
        for child in reversed(ele_model.children_of(e)):
            stack.append((child, node))
    return root_node


def export_part_tree(ele_model):
    """ Return the hierarchy as nested dicts of element names and ids. """
    def node_attrs(attrs_):
        return [(k, v) for k, v in attrs_ if k in ('name', 'id')]

    exporter = DictExporter(attriter=node_attrs)
    return exporter.export(build_part_tree(ele_model))


def list_tree(ele_model, *args, **kwargs):
    """ Print a graphical console representation of the tree.

    The optional arguments are passed through to the by_attr filter.
    Useful examples or arguments include:

        - list_tree(em, lambda node: f"{node.name}: {node.tag}")
        - list_tree(em, attrname='id')

    """
    list_tree_from_node(build_part_tree(ele_model), *args, **kwargs)


def list_tree_from_node(node, *args, **kwargs):
    """ List the tree from `node` with attribute filtering. """
    tag_filter = kwargs.pop('childiter', list)
    print(RenderTree(node, childiter=tag_filter).by_attr(*args, **kwargs))
