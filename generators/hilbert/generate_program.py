# Generates a Go program that tests arbitrary precision constant arithmetic.
# The program declares the elements of a Hilbert matrix H, its inverse I and
# the product P = H*I as untyped constants; P has to come out as the identity
# matrix exactly.
#
# usage: generate_program.py [-H size] [-out file]
# Without -out the program is written to stdout and carries an assert(ok)
# declaration so that a type checker can verify it in place.
import sys

DEFAULT_H = 5


def parse_args(argv):
    usage = f"usage: {argv[0]} [-H size] [-out file]"
    n = DEFAULT_H
    out = ""
    args = argv[1:]
    while args:
        flag = args.pop(0)
        if flag not in ("-H", "-out") or not args:
            print(usage, file=sys.stderr)
            sys.exit(1)
        value = args.pop(0)
        if flag == "-out":
            out = value
            continue
        try:
            n = int(value)
        except ValueError:
            print(usage, file=sys.stderr)
            sys.exit(1)
        if n < 1:
            print(f"{argv[0]}: Hilbert matrix size must be positive, got {n}", file=sys.stderr)
            sys.exit(1)
    return n, out


def program(n, out=""):
    if n < 1:
        raise ValueError(f"Hilbert matrix size must be positive, got {n}")

    quoted = '"' + out.replace("\\", "\\\\").replace('"', '\\"') + '"'
    src = f"""// WARNING: GENERATED FILE - DO NOT MODIFY MANUALLY!
// (To generate: python -m generators.hilbert.generate_program -H {n} -out {quoted})

// This program tests arbitrary precision constant arithmetic
// by generating the constant elements of a Hilbert matrix H,
// its inverse I, and the product P = H*I. The product should
// be the identity matrix.
package main

func main() {{
	if !ok {{
		printProduct()
		return
	}}
	println("PASS")
}}

"""
    src += hilbert(n)
    src += inverse(n)
    src += product(n)
    src += verify(n, check=(out == ""))
    src += print_product(n)
    src += binomials(2 * n - 1)
    src += factorials(2 * n - 1)
    return src


def hilbert(n):
    s = f"// Hilbert matrix, n = {n}\nconst (\n"
    for i in range(n):
        s += "\t" + ", ".join(f"h{i}_{j}" for j in range(n))
        if i == 0:
            s += " = " + ", ".join(f"1.0/(iota + {j + 1})" for j in range(n))
        s += "\n"
    return s + ")\n\n"


def inverse(n):
    s = "// Inverse Hilbert matrix\nconst (\n"
    for i in range(n):
        for j in range(n):
            sign = "-" if (i + j) & 1 else "+"
            s += (f"\ti{i}_{j} = {sign}{i + j + 1} * b{n + i}_{n - j - 1} * b{n + j}_{n - i - 1}"
                  f" * b{i + j}_{i} * b{i + j}_{i}\n")
        s += "\n"
    return s + ")\n\n"


def product(n):
    s = "// Product matrix\nconst (\n"
    for i in range(n):
        for j in range(n):
            terms = " + ".join(f"h{i}_{k}*i{k}_{j}" for k in range(n))
            s += f"\tp{i}_{j} = {terms}\n"
        s += "\n"
    return s + ")\n\n"


def verify(n, check=True):
    s = "// Verify that product is the identity matrix\nconst ok =\n"
    for i in range(n):
        s += "\t" + " && ".join(f"p{i}_{j} == {int(i == j)}" for j in range(n)) + " &&\n"
    s += "\ttrue\n\n"

    # only meaningful when the output is type-checked as generated
    if check:
        s += "const _ = assert(ok)\n\n"
    return s


def print_product(n):
    s = "func printProduct() {\n"
    for i in range(n):
        row = ", ".join(f"p{i}_{j}" for j in range(n))
        s += f"\tprintln({row})\n"
    return s + "}\n\n"


def binomials(n):
    s = "// Binomials\nconst (\n"
    for j in range(n + 1):
        if j > 0:
            s += "\n"
        for k in range(j + 1):
            s += f"\tb{j}_{k} = f{j} / (f{k}*f{j - k})\n"
    return s + ")\n\n"


def factorials(n):
    s = "// Factorials\nconst (\n\tf0 = 1\n\tf1 = 1\n"
    for i in range(2, n + 1):
        s += f"\tf{i} = f{i - 1} * {i}\n"
    return s + ")\n\n"


def main(argv=None):
    n, out = parse_args(sys.argv if argv is None else argv)
    src = program(n, out)
    if out:
        with open(out, "w") as f:
            f.write(src)
        print(f"Wrote {n}x{n} Hilbert program to {out}", file=sys.stderr)
    else:
        sys.stdout.write(src)


if __name__ == "__main__":
    main()
