from asa.builtin.print_builtin import print_builtin

# Builtins take precedence over user functions with the same name.
BUILTINS = {
    "print": print_builtin,
}
