"""
Prefix arithmetic walkthrough (Python)

Demonstrates each stage:
1. Tokenize an expression
2. Read the tokens into a tree
3. Evaluate the tree
4. Syntax errors: sentinel vs strict mode
5. Division by zero

Run: pip install -e . && python examples/demo/demo.py
"""

from sexpcalc import Config, calculate, evaluate, read_expression, tokenize

print("=== Prefix Arithmetic Demo ===\n")

src = "(+ 10 (* 5 2) (- 8 3) (/ 20 4))"

# 1. Tokenize
tokens = tokenize(src)
print("1. Tokenized")
print(f"   {tokens}\n")

# 2. Read
tree = read_expression(src)
print("2. Read into a tree")
print(f"   Operator: {tree.head}, operands: {len(tree.operands)}")
print(f"   Rendered: {tree}\n")

# 3. Evaluate
print("3. Evaluated")
print(f"   Result: {evaluate(tree)}\n")

# 4. Syntax errors
bad = "(+ 5)"
print(f"4. Syntax error in {bad!r}")
print(f"   Default: {calculate(bad)['error']}")
print(f"   Strict:  {calculate(bad, Config(strict=True))['error']}\n")

# 5. Division by zero
r = calculate("(/ 1 (- 3 3))")
print("5. Divide by (- 3 3)")
print(f"   Result: {r['value']}")

print("\n=== Done ===")
