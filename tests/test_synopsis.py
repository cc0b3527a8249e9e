"""
Unit tests for SYNOPSIS symbol extraction.

Rendering is replaced by a small troff-to-text stand-in so the tests do
not depend on `man` being installed.
"""

import tempfile
import unittest
from pathlib import Path

from mangrep.ccomments import strip_comments_text
from mangrep.manpage.synopsis import (
    collapse_adjacent,
    list_functions,
    list_variables,
    man_lsfunc,
    man_lsvar,
)

INDENT = " " * 7


def fake_render(source):
    """Approximate `man` output: section names flush left, body indented."""
    out = []
    for line in source.split('\n'):
        if line.startswith('.TH'):
            _, name, section = line.split()[:3]
            out.append(f"{name}({section})")
        elif line.startswith('.SH'):
            out.append(line[3:].strip().strip('"'))
        elif line.startswith(('.B ', '.BI ', '.BR ')):
            out.append(INDENT + line.split(' ', 1)[1])
        elif line.startswith('.'):
            continue
        elif line.strip():
            out.append(INDENT + line.strip())
    return '\n'.join(out) + '\n'


def synopsis(*declarations):
    return ''.join(INDENT + d + '\n' for d in declarations)


class TestListFunctions(unittest.TestCase):
    """Test cases for list_functions."""

    def test_simple_declaration(self):
        self.assertEqual(list_functions(synopsis("int foo(int x);")), ["foo"])

    def test_syscall_wrapper(self):
        text = synopsis("long syscall(SYS_openat2, int, const char *, struct open_how *, size_t);")
        self.assertEqual(list_functions(text), ["openat2"])

    def test_pointer_return_type(self):
        self.assertEqual(list_functions(synopsis("void *malloc(size_t size);")), ["malloc"])

    def test_variadic(self):
        text = synopsis("int printf(const char *restrict format, ...);")
        self.assertEqual(list_functions(text), ["printf"])

    def test_variadic_with_trailing_comment(self):
        """`... /* mode_t mode */ );` still matches once the comment is gone."""
        text = strip_comments_text(synopsis("int open(const char *pathname, int flags, ... /* mode_t mode */ );"))
        self.assertEqual(list_functions(text), ["open"])

    def test_variadic_with_comment_on_next_line(self):
        text = strip_comments_text(
            INDENT + "int fcntl(int fd, int op, ...\n"
            + INDENT + "          /* arg */ );\n"
        )
        self.assertEqual(list_functions(text), ["fcntl"])

    def test_variadic_pages_in_sequence(self):
        text = strip_comments_text(
            INDENT + "int open(const char *pathname, int flags, ... /* mode_t mode */ );\n"
            + INDENT + "int fcntl(int fd, int op, ...\n"
            + INDENT + "          /* arg */ );\n"
            + INDENT + "int creat(const char *pathname, mode_t mode);\n"
        )
        self.assertEqual(list_functions(text), ["open", "fcntl", "creat"])

    def test_array_and_function_pointer_parameters(self):
        text = synopsis("void qsort(void base[], size_t n, int (*compar)(const void *, const void *));")
        self.assertEqual(list_functions(text), ["qsort"])

    def test_declaration_spanning_lines(self):
        text = (
            INDENT + "ssize_t pread(int fd, void *buf,\n"
            + INDENT + "              size_t count, off_t offset);\n"
            + INDENT + "int close(int fd);\n"
        )
        self.assertEqual(list_functions(text), ["pread", "close"])

    def test_unindented_and_non_declarations_ignored(self):
        text = (
            "int foo(int x);\n"
            + INDENT + "#include <unistd.h>\n"
            + INDENT + "int bar(int x); /* not trailing spaces only */\n"
            + INDENT + "Feature Test Macro Requirements for glibc (see feature_test_macros(7)):\n"
        )
        self.assertEqual(list_functions(text), [])

    def test_adjacent_duplicates_collapse(self):
        text = synopsis("int foo(int x);", "int foo(long x);", "int bar(void);", "int foo(void);")
        self.assertEqual(list_functions(text), ["foo", "bar", "foo"])

    def test_extern_function_pointer_is_not_a_function(self):
        text = synopsis("extern int (*compar)(const void *, const void *);")
        self.assertEqual(list_functions(text), [])


class TestListVariables(unittest.TestCase):
    """Test cases for list_variables."""

    def test_function_pointer(self):
        text = synopsis("extern int (*compar)(const void *, const void *);")
        self.assertEqual(list_variables(text), ["compar"])

    def test_pointer_returning_function_pointer(self):
        text = synopsis("extern void *(*malloc_hook)(size_t size, const void *caller);")
        self.assertEqual(list_variables(text), ["malloc_hook"])

    def test_simple_variables(self):
        text = synopsis("extern char *optarg;", "extern int optind;", "extern char **environ;")
        self.assertEqual(list_variables(text), ["optarg", "optind", "environ"])

    def test_functions_are_not_variables(self):
        text = synopsis("int getopt(int argc, char *argv[], const char *optstring);",
                        "extern int opterr;")
        self.assertEqual(list_variables(text), ["opterr"])

    def test_typedef_lines_dropped(self):
        text = synopsis("extern int typedef_count;", "extern int optopt;")
        self.assertEqual(list_variables(text), ["optopt"])

    def test_non_extern_ignored(self):
        self.assertEqual(list_variables(synopsis("int optind;")), [])

    def test_adjacent_duplicates_collapse(self):
        text = synopsis("extern int x;", "extern int x;", "extern int y;", "extern int x;")
        self.assertEqual(list_variables(text), ["x", "y", "x"])


class TestCollapseAdjacent(unittest.TestCase):

    def test_only_adjacent(self):
        self.assertEqual(collapse_adjacent(["a", "a", "b", "a", "a"]), ["a", "b", "a"])

    def test_empty(self):
        self.assertEqual(collapse_adjacent([]), [])


class TestPipeline(unittest.TestCase):
    """End-to-end extraction from man page sources."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name, text):
        path = self.root / name
        path.write_text(text)
        return path

    def test_single_page(self):
        path = self.write("foo.2", ".TH FOO 2\n.SH SYNOPSIS\n int foo(int x);\n.SH DESCRIPTION\nFoo.\n")
        self.assertEqual(man_lsfunc([path], render=fake_render), ["foo"])

    def test_description_is_not_searched(self):
        path = self.write("foo.2", ".TH FOO 2\n.SH SYNOPSIS\n int foo(int x);\n"
                                   ".SH DESCRIPTION\n.B int other(void);\n")
        self.assertEqual(man_lsfunc([path], render=fake_render), ["foo"])

    def test_comments_are_stripped(self):
        path = self.write("foo.2", ".TH FOO 2\n.SH SYNOPSIS\n"
                                   ".B /* Deprecated:\n.B int old(void);\n.B */\n"
                                   ".B int foo(int x);\n")
        self.assertEqual(man_lsfunc([path], render=fake_render), ["foo"])

    def test_directory_order_and_collapse(self):
        self.write("a.2", ".TH A 2\n.SH SYNOPSIS\n.B int foo(int x);\n.B int foo(long x);\n")
        self.write("b.2", ".TH B 2\n.SH SYNOPSIS\n.B int bar(void);\n")
        self.write("c.2", ".TH C 2\n.SH SYNOPSIS\n.B int foo(void);\n")
        self.write("d.2", ".so a.2\n")
        self.assertEqual(man_lsfunc([self.root], render=fake_render), ["foo", "bar", "foo"])

    def test_several_paths(self):
        second = self.write("z.3", ".TH Z 3\n.SH SYNOPSIS\n.B int zed(void);\n")
        first = self.write("y.3", ".TH Y 3\n.SH SYNOPSIS\n.B int why(void);\n")
        self.assertEqual(man_lsfunc([second, first], render=fake_render), ["zed", "why"])

    def test_variables(self):
        path = self.write("qsort.3", ".TH QSORT 3\n.SH SYNOPSIS\n"
                                     ".B extern int (*compar)(const void *, const void *);\n"
                                     ".B void qsort(void *base, size_t n);\n")
        self.assertEqual(man_lsvar([path], render=fake_render), ["compar"])
        self.assertEqual(man_lsfunc([path], render=fake_render), ["qsort"])

    def test_missing_path(self):
        with self.assertLogs("mangrep.manpage.discovery", level="ERROR"):
            self.assertEqual(man_lsfunc([self.root / "nope.2"], render=fake_render), [])


if __name__ == '__main__':
    unittest.main()
