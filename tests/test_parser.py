"""
Test suite for the Dotlin parser.

Tests cover:
- Operator precedence and associativity
- Prefix forms: literals, calls, index/member suffixes, grouping, signs
- Statement grammar: headers, fun, return, val/var
- The uninitialized-variable rule enforced during parsing
- Error reporting

Author: xwest
"""

import math
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from dotlin.lexer.lexer import tokenize
from dotlin.lexer.errors import LexerError
from dotlin.parser.parser import Parser, parse_program, parse_expression
from dotlin.parser.errors import ParseError
from dotlin.parser.ast_nodes import (
    Program, ExpressionStatement, ReturnStatement, FunctionDeclaration,
    VariableDeclaration, NumberLiteral, StringLiteral, Identifier,
    IndexExpression, MemberExpression, UnaryExpression, BinaryExpression,
    CallExpression, ast_to_dict, iter_declarations, walk,
)
from dotlin.analyzer.errors import SemanticError, UninitializedVariableError


def num(value):
    return NumberLiteral(float(value))


class TestExpressionParsing(unittest.TestCase):
    """Test cases for expression parsing."""

    def test_multiplication_binds_tighter_than_addition(self):
        self.assertEqual(
            parse_expression("1+2*3"),
            BinaryExpression("+", num(1), BinaryExpression("*", num(2), num(3))),
        )

    def test_parentheses_override_precedence(self):
        self.assertEqual(
            parse_expression("(1+2)*3"),
            BinaryExpression("*", BinaryExpression("+", num(1), num(2)), num(3)),
        )

    def test_subtraction_is_left_associative(self):
        self.assertEqual(
            parse_expression("1-2-3"),
            BinaryExpression("-", BinaryExpression("-", num(1), num(2)), num(3)),
        )

    def test_division_is_left_associative(self):
        self.assertEqual(
            parse_expression("8/4/2"),
            BinaryExpression("/", BinaryExpression("/", num(8), num(4)), num(2)),
        )

    def test_power_is_right_associative(self):
        self.assertEqual(
            parse_expression("2^3^2"),
            BinaryExpression("^", num(2), BinaryExpression("^", num(3), num(2))),
        )

    def test_power_binds_tighter_than_multiplication(self):
        self.assertEqual(
            parse_expression("2*3^2"),
            BinaryExpression("*", num(2), BinaryExpression("^", num(3), num(2))),
        )

    def test_unary_minus_binds_tighter_than_addition(self):
        self.assertEqual(
            parse_expression("-3+5"),
            BinaryExpression("+", UnaryExpression("-", num(3)), num(5)),
        )

    def test_unary_minus_binds_tighter_than_multiplication(self):
        self.assertEqual(
            parse_expression("-2*3"),
            BinaryExpression("*", UnaryExpression("-", num(2)), num(3)),
        )

    def test_unary_minus_includes_power(self):
        self.assertEqual(
            parse_expression("-2^2"),
            UnaryExpression("-", BinaryExpression("^", num(2), num(2))),
        )

    def test_unary_plus_and_nesting(self):
        self.assertEqual(
            parse_expression("+-1"),
            UnaryExpression("+", UnaryExpression("-", num(1))),
        )

    def test_literals(self):
        self.assertEqual(parse_expression("3.5"), num(3.5))
        self.assertEqual(parse_expression("'abc'"), StringLiteral("abc"))
        self.assertEqual(parse_expression("name"), Identifier("name"))

    def test_malformed_numeral_is_nan(self):
        node = parse_expression("1.2.3")
        self.assertIsInstance(node, NumberLiteral)
        self.assertTrue(math.isnan(node.value))

    def test_call_with_arguments(self):
        self.assertEqual(
            parse_expression("max(1, a+2)"),
            CallExpression(Identifier("max"), (num(1), BinaryExpression("+", Identifier("a"), num(2)))),
        )

    def test_call_without_arguments(self):
        self.assertEqual(parse_expression("now()"), CallExpression(Identifier("now"), ()))

    def test_index_and_member_suffixes(self):
        self.assertEqual(
            parse_expression("items[0].size"),
            MemberExpression(IndexExpression(Identifier("items"), num(0)), "size"),
        )

    def test_call_then_suffixes(self):
        self.assertEqual(
            parse_expression("load(x).rows[1]"),
            IndexExpression(
                MemberExpression(CallExpression(Identifier("load"), (Identifier("x"),)), "rows"),
                num(1),
            ),
        )

    def test_suffixes_bind_tighter_than_operators(self):
        self.assertEqual(
            parse_expression("a.b * 2"),
            BinaryExpression("*", MemberExpression(Identifier("a"), "b"), num(2)),
        )

    def test_full_mixed_expression_shape(self):
        node = parse_expression("3+4*2/(1-5)^2^3")
        self.assertEqual(node.op, "+")
        self.assertEqual(node.right.op, "/")
        self.assertEqual(node.right.right.op, "^")
        self.assertEqual(node.right.right.right, BinaryExpression("^", num(2), num(3)))

    def test_trailing_garbage_fails(self):
        with self.assertRaises(ParseError) as ctx:
            parse_expression("1+2 3")
        self.assertEqual(ctx.exception.diagnostic.code, "P013")
        self.assertEqual(ctx.exception.position, 3)

    def test_allowed_terminators(self):
        for source in ("(1+2)", "(1+2);", "(1+2))", "1+2;", "1+2) ignored"):
            with self.subTest(source=source):
                parse_expression(source)

    def test_unexpected_prefix_token(self):
        with self.assertRaises(ParseError) as ctx:
            parse_expression("*3")
        self.assertIn("prefix position", ctx.exception.message)
        self.assertEqual(ctx.exception.kind, "Unexpected token")

    def test_empty_expression_is_unexpected_end(self):
        with self.assertRaises(ParseError) as ctx:
            parse_expression("")
        self.assertEqual(ctx.exception.diagnostic.code, "P010")

    def test_missing_closing_paren(self):
        with self.assertRaises(ParseError):
            parse_expression("(1+2")

    def test_missing_closing_bracket(self):
        with self.assertRaises(ParseError):
            parse_expression("a[1")

    def test_member_requires_identifier(self):
        with self.assertRaises(ParseError) as ctx:
            parse_expression("a.1")
        self.assertEqual(ctx.exception.diagnostic.code, "P003")

    def test_arguments_need_commas(self):
        with self.assertRaises(ParseError):
            parse_expression("f(1 2)")

    def test_deep_nesting_is_a_parse_error(self):
        depth = sys.getrecursionlimit() * 2
        for source in ("(" * depth + "1" + ")" * depth, "-" * depth + "1"):
            with self.subTest(kind=source[0]):
                with self.assertRaises(ParseError) as ctx:
                    parse_expression(source)
                self.assertEqual(ctx.exception.diagnostic.code, "P005")
                self.assertEqual(ctx.exception.message, "Expression nested too deeply")
        with self.assertRaises(ParseError) as ctx:
            parse_program("val x = " + "(" * depth + "1" + ")" * depth)
        self.assertEqual(ctx.exception.kind, "Expression nested too deeply")

    def test_moderate_nesting_parses(self):
        self.assertEqual(parse_expression("(" * 50 + "7" + ")" * 50), num(7))

    def test_lexer_errors_propagate(self):
        with self.assertRaises(LexerError):
            parse_expression("1 ~ 2")


class TestStatementParsing(unittest.TestCase):
    """Test cases for statement parsing."""

    def test_declarations(self):
        program = parse_program("val x: Int;\nvar y = 5;")
        self.assertEqual(program, Program((
            VariableDeclaration("val", "x", "Int", None),
            VariableDeclaration("var", "y", None, num(5)),
        )))
        self.assertFalse(program.body[0].is_mutable)
        self.assertTrue(program.body[1].is_mutable)

    def test_declaration_with_type_and_initializer(self):
        program = parse_program("val ratio: Double = 1/3")
        self.assertEqual(
            program.body[0],
            VariableDeclaration("val", "ratio", "Double", BinaryExpression("/", num(1), num(3))),
        )

    def test_uninitialized_untyped_declaration_fails(self):
        with self.assertRaises(UninitializedVariableError) as ctx:
            parse_program("val x;")
        self.assertEqual(ctx.exception.message, "Uninitialized variable requires explicit type")
        self.assertEqual(str(ctx.exception.args[0]), "Uninitialized variable requires explicit type")
        self.assertEqual(ctx.exception.name, "x")
        self.assertIsInstance(ctx.exception, SemanticError)

    def test_uninitialized_var_inside_function_fails(self):
        with self.assertRaises(UninitializedVariableError) as ctx:
            parse_program("fun f() { var counter }")
        self.assertEqual(ctx.exception.kind, "var")

    def test_declaration_node_rejects_missing_type_and_init(self):
        with self.assertRaises(ValueError):
            VariableDeclaration("val", "x")

    def test_generic_variable_type_is_rejected(self):
        with self.assertRaises(ParseError):
            parse_program("val xs: List<Int> = 1;")

    def test_type_annotation_must_be_identifier(self):
        with self.assertRaises(ParseError) as ctx:
            parse_program("val x: 5;")
        self.assertEqual(ctx.exception.diagnostic.code, "P003")

    def test_variable_name_required(self):
        with self.assertRaises(ParseError):
            parse_program("val = 3;")

    def test_function_declaration(self):
        program = parse_program("fun add(a, b) { return a + b; }")
        self.assertEqual(program.body, (
            FunctionDeclaration("add", ("a", "b"), (
                ReturnStatement(BinaryExpression("+", Identifier("a"), Identifier("b"))),
            )),
        ))

    def test_parameter_types_are_skipped(self):
        program = parse_program("fun sum(xs: List<Map<String, Int>>, n: Int) { return n }")
        declaration = program.body[0]
        self.assertEqual(declaration.params, ("xs", "n"))
        self.assertEqual(declaration.body, (ReturnStatement(Identifier("n")),))

    def test_empty_function(self):
        program = parse_program("fun noop() {}")
        self.assertEqual(program.body, (FunctionDeclaration("noop", (), ()),))

    def test_nested_function_body(self):
        program = parse_program("fun outer() { val k = 2; fun inner(x) { return x * k } return inner(3) }")
        outer = program.body[0]
        self.assertEqual(len(outer.body), 3)
        self.assertIsInstance(outer.body[1], FunctionDeclaration)

    def test_unterminated_function_body(self):
        with self.assertRaises(ParseError) as ctx:
            parse_program("fun f() { return 1;")
        self.assertEqual(ctx.exception.diagnostic.code, "P010")

    def test_function_requires_name_and_parens(self):
        for source in ("fun () {}", "fun f {}", "fun f() return 1"):
            with self.subTest(source=source):
                with self.assertRaises(ParseError):
                    parse_program(source)

    def test_return_forms(self):
        program = parse_program("return; return 1; return")
        self.assertEqual(program.body, (
            ReturnStatement(None),
            ReturnStatement(num(1)),
            ReturnStatement(None),
        ))

    def test_return_without_argument_before_closing_brace(self):
        program = parse_program("fun f() { return }")
        self.assertEqual(program.body[0].body, (ReturnStatement(None),))

    def test_import_and_package_headers(self):
        program = parse_program("package demo.app;\nimport std.io.*;\nval x = 1;")
        self.assertEqual(program.body, (
            ExpressionStatement(Identifier("package")),
            ExpressionStatement(Identifier("import")),
            VariableDeclaration("val", "x", None, num(1)),
        ))

    def test_header_without_semicolon_runs_to_end(self):
        program = parse_program("import a.b val x")
        self.assertEqual(program.body, (ExpressionStatement(Identifier("import")),))

    def test_expression_statements_with_optional_semicolons(self):
        program = parse_program("print(1); x")
        self.assertEqual(program.body, (
            ExpressionStatement(CallExpression(Identifier("print"), (num(1),))),
            ExpressionStatement(Identifier("x")),
        ))

    def test_assignment_is_not_an_expression(self):
        with self.assertRaises(ParseError):
            parse_program("x = 3;")

    def test_control_flow_keywords_have_no_grammar(self):
        with self.assertRaises(ParseError):
            parse_program("if (x) { return 1 }")

    def test_empty_program(self):
        self.assertEqual(parse_program("// nothing here\n"), Program(()))

    def test_parsing_is_idempotent(self):
        source = "fun f(a) { return a ^ 2 }\nval y: Int\nvar z = f(3) + items[0].n"
        self.assertEqual(parse_program(source), parse_program(source))

    def test_parser_over_token_list(self):
        parser = Parser(tokenize("1 + 2"))
        self.assertEqual(parser.parse_expression(), BinaryExpression("+", num(1), num(2)))
        self.assertEqual(parser.current, 3)


class TestASTHelpers(unittest.TestCase):
    """Test cases for AST traversal and export."""

    def test_walk_is_pre_order(self):
        node = parse_expression("a + f(b)")
        names = [n.node_type.value for n in walk(node)]
        self.assertEqual(names, ["Binary", "Identifier", "Call", "Identifier", "Identifier"])

    def test_iter_declarations_includes_nested(self):
        program = parse_program("val a = 1\nfun f() { var b: Int }")
        names = [d.name for d in iter_declarations(program)]
        self.assertEqual(names, ["a", "f", "b"])

    def test_ast_to_dict(self):
        program = parse_program("val x = -1")
        self.assertEqual(ast_to_dict(program), {
            "type": "Program",
            "body": [{
                "type": "VariableDeclaration",
                "kind": "val",
                "name": "x",
                "type_name": None,
                "init": {
                    "type": "Unary",
                    "op": "-",
                    "operand": {"type": "NumberLiteral", "value": 1.0},
                },
            }],
        })


if __name__ == '__main__':
    unittest.main()
