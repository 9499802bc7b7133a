import sys

def colored(*values:str, color) -> str:
    return f'\x1b[38;5;{color}m{" ".join(values)}\x1b[0m' if color and sys.stderr.isatty() else ' '.join(values)

# diagnostics only, stdout carries the generated table
def print_colon(previous_value:str, *next_values:object, color=None) -> None: print(colored(previous_value, color=color)+':', *next_values, file=sys.stderr)

def print_error(*values:object) -> None: print_colon('Error', *values, color=9)
