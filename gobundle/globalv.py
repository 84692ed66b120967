# globalv.py

from types import SimpleNamespace as sn


# Reserved words of the Go language, see https://go.dev/ref/spec#Keywords
KEYWORDS = frozenset([
	"break",
	"case",
	"chan",
	"const",
	"continue",
	"default",
	"defer",
	"else",
	"fallthrough",
	"for",
	"func",
	"go",
	"goto",
	"if",
	"import",
	"interface",
	"map",
	"package",
	"range",
	"return",
	"select",
	"struct",
	"switch",
	"type",
	"var",
])

# Characters that end a word when folding file names to CamelCase.
SEPARATORS = frozenset("_- :,.")

# Size of read chunks when quoting files.
BUFSIZE = 4096

go = sn(
	header=sn(
		# since Go 1.9 generated files are recognized by ^// Code generated .* DO NOT EDIT\.$
		generated="// Code generated automatically; DO NOT EDIT.",
		package="package {name}",
	),
	block=sn(
		comment="// These {decl}s are included from files by go generate.",
		kinds=("var", "const"),
	),
	escapes={
		0x07: "\\a",
		0x08: "\\b",
		0x0C: "\\f",
		0x0A: "\\n",
		0x0D: "\\r",
		0x09: "\\t",
		0x0B: "\\v",
		0x5C: "\\\\",
		0x22: '\\"',
	},
)
