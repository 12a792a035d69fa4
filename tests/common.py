import ast
import inspect
from ast import NodeTransformer
from dataclasses import dataclass
from textwrap import dedent

from _pytest.assertion.rewrite import AssertionRewriter


class Thing:
    pass


def thing(**fields):
    t = Thing()
    vars(t).update(fields)
    return t


@dataclass
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class FrozenPoint:
    x: int
    y: int


class Slotted:
    __slots__ = ("x",)

    def __init__(self, x=0):
        self.x = x


class Counter:
    def __init__(self, count=0):
        self.count = count

    def increment(self):
        self.count += 1
        return self.count


class Greeter:
    def __init__(self, name):
        self.name = name
        # prefix comes from the owning container
        self.greeting = f"{self.prefix}, {name}!"


class Holder:
    def __init__(self, shared=None):
        if shared is not None:
            self.shared = shared


class Dynamic:
    def __getattr__(self, attr):
        if attr.startswith("dyn_"):
            return attr[4:]
        raise AttributeError(attr)


class Broken:
    def __init__(self):
        raise ValueError("cannot build")


class AssertTransformer(NodeTransformer):
    def visit_FunctionDef(self, node):
        newfns = []
        for i, stmt in enumerate(node.body):
            if not isinstance(stmt, ast.Assert):
                raise Exception("@one_test_per_assert requires all statements to be asserts")
            else:
                newfns.append(
                    ast.FunctionDef(
                        name=f"{node.name}_assert{i + 1}",
                        args=node.args,
                        body=[stmt],
                        decorator_list=node.decorator_list,
                        returns=node.returns,
                    )
                )
        return ast.Module(body=newfns, type_ignores=[])


def one_test_per_assert(fn):
    src = dedent(inspect.getsource(fn))
    filename = inspect.getsourcefile(fn)
    tree = ast.parse(src, filename)
    tree = tree.body[0]
    assert isinstance(tree, ast.FunctionDef)
    tree.decorator_list = []
    new_tree = AssertTransformer().visit(tree)
    ast.fix_missing_locations(new_tree)
    _, lineno = inspect.getsourcelines(fn)
    ast.increment_lineno(new_tree, lineno - 1)
    # Use pytest's assertion rewriter for nicer error messages
    AssertionRewriter(filename, None, None).run(new_tree)
    new_fn = compile(new_tree, filename, "exec")
    glb = fn.__globals__
    exec(new_fn, glb, glb)
    return None
