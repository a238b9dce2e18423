import pytest

from rfc6570.expander import expand, expand_expression
from rfc6570.parser import parse_expression
from rfc6570.values import ListValue, MapValue, Scalar

# Variables from RFC 6570 section 3.2.1
VARIABLES = {
    "var": "value",
    "hello": "Hello World!",
    "half": "50%",
    "path": "/foo/bar",
    "who": "fred",
    "v": "6",
    "x": "1024",
    "y": "768",
    "empty": "",
    "undef": None,
    "list": ["red", "green", "blue"],
    "keys": {"semi": ";", "dot": ".", "comma": ","},
    "empty_keys": {},
}


class TestExpand:
    @pytest.mark.parametrize(
        "template,expected",
        [
            # Simple string expansion
            ("{var}", "value"),
            ("{hello}", "Hello%20World%21"),
            ("{half}", "50%25"),
            ("O{empty}X", "OX"),
            ("O{undef}X", "OX"),
            ("{x,y}", "1024,768"),
            ("{x,hello,y}", "1024,Hello%20World%21,768"),
            ("?{x,empty}", "?1024,"),
            ("?{x,undef}", "?1024"),
            ("{var:3}", "val"),
            ("{var:30}", "value"),
            ("{list}", "red,green,blue"),
            ("{list*}", "red,green,blue"),
            ("{keys}", "semi,%3B,dot,.,comma,%2C"),
            ("{keys*}", "semi=%3B,dot=.,comma=%2C"),
            # Reserved expansion
            ("{+var}", "value"),
            ("{+hello}", "Hello%20World!"),
            ("{+half}", "50%25"),
            ("{+path}/here", "/foo/bar/here"),
            ("here?ref={+path}", "here?ref=/foo/bar"),
            ("{+path:6}/here", "/foo/b/here"),
            ("{+list}", "red,green,blue"),
            ("{+keys}", "semi,;,dot,.,comma,,"),
            ("{+keys*}", "semi=;,dot=.,comma=,"),
            # Fragment expansion
            ("{#var}", "#value"),
            ("{#hello}", "#Hello%20World!"),
            ("{#half}", "#50%25"),
            ("{#path:6}/here", "#/foo/b/here"),
            ("{#list*}", "#red,green,blue"),
            ("{#keys}", "#semi,;,dot,.,comma,,"),
            # Label expansion
            ("{.who}", ".fred"),
            ("{.who,who}", ".fred.fred"),
            ("{.half,who}", ".50%25.fred"),
            ("X{.var:3}", "X.val"),
            ("X{.list}", "X.red,green,blue"),
            ("X{.list*}", "X.red.green.blue"),
            ("X{.keys}", "X.semi,%3B,dot,.,comma,%2C"),
            ("X{.keys*}", "X.semi=%3B.dot=..comma=%2C"),
            ("X{.empty_keys}", "X"),
            ("X{.empty_keys*}", "X"),
            # Path segment expansion
            ("{/who}", "/fred"),
            ("{/who,who}", "/fred/fred"),
            ("{/half,who}", "/50%25/fred"),
            ("{/var,empty}", "/value/"),
            ("{/var,undef}", "/value"),
            ("{/var,x}/here", "/value/1024/here"),
            ("{/var:1,var}", "/v/value"),
            ("{/list}", "/red,green,blue"),
            ("{/list*}", "/red/green/blue"),
            ("{/list*,path:4}", "/red/green/blue/%2Ffoo"),
            ("{/keys*}", "/semi=%3B/dot=./comma=%2C"),
            # Path-style parameter expansion
            ("{;who}", ";who=fred"),
            ("{;half}", ";half=50%25"),
            ("{;empty}", ";empty"),
            ("{;v,empty,who}", ";v=6;empty;who=fred"),
            ("{;v,bar,who}", ";v=6;who=fred"),
            ("{;x,y}", ";x=1024;y=768"),
            ("{;x,y,empty}", ";x=1024;y=768;empty"),
            ("{;x,y,undef}", ";x=1024;y=768"),
            ("{;hello:5}", ";hello=Hello"),
            ("{;list}", ";list=red,green,blue"),
            ("{;list*}", ";list=red;list=green;list=blue"),
            ("{;keys}", ";keys=semi,%3B,dot,.,comma,%2C"),
            ("{;keys*}", ";semi=%3B;dot=.;comma=%2C"),
            # Form-style query expansion
            ("{?who}", "?who=fred"),
            ("{?half}", "?half=50%25"),
            ("{?x,y}", "?x=1024&y=768"),
            ("{?x,y,empty}", "?x=1024&y=768&empty="),
            ("{?x,y,undef}", "?x=1024&y=768"),
            ("{?var:3}", "?var=val"),
            ("{?list}", "?list=red,green,blue"),
            ("{?list*}", "?list=red&list=green&list=blue"),
            ("{?keys}", "?keys=semi,%3B,dot,.,comma,%2C"),
            ("{?keys*}", "?semi=%3B&dot=.&comma=%2C"),
            ("{?empty_keys}", ""),
            # Form-style query continuation
            ("{&who}", "&who=fred"),
            ("{&half}", "&half=50%25"),
            ("?fixed=yes{&x}", "?fixed=yes&x=1024"),
            ("{&x,y,empty}", "&x=1024&y=768&empty="),
            ("{&var:3}", "&var=val"),
            ("{&list}", "&list=red,green,blue"),
            ("{&list*}", "&list=red&list=green&list=blue"),
            ("{&keys}", "&keys=semi,%3B,dot,.,comma,%2C"),
            ("{&keys*}", "&semi=%3B&dot=.&comma=%2C"),
            ("{&empty_keys*}", ""),
        ],
    )
    def test_rfc_examples(self, template, expected):
        # Act
        result = expand(template, VARIABLES)

        # Assert
        assert result == expected

    @pytest.mark.parametrize(
        "template", ["{/list*}", "{/list}", "{.list*}", "{?list}", "{&list*}"]
    )
    def test_empty_list_suppresses_prefix(self, template):
        # Act
        result = expand(template, {"list": []})

        # Assert
        assert result == ""

    def test_empty_contributions_drop_the_prefix(self):
        assert expand("foo{#empty}", {"empty": ""}) == "foo"
        assert expand("foo{#list}", {"list": []}) == "foo"

    @pytest.mark.parametrize(
        "template", ["http://example.com/", "foo{bar", "a}b", "a{}b", ""]
    )
    def test_literal_templates_pass_through(self, template):
        # Act
        result = expand(template, VARIABLES)

        # Assert
        assert result == template

    def test_no_bindings_leaves_literal_skeleton(self):
        # Act
        result = expand("http://example.com/{a}/x{/b}{?c,d}#{e}", {})

        # Assert
        assert result == "http://example.com//x#"

    def test_none_bindings(self):
        assert expand("/users{/id}", None) == "/users"

    def test_literal_text_is_not_encoded(self):
        assert expand("/a b/{var}", {"var": "c d"}) == "/a b/c%20d"

    def test_accepts_explicit_values(self):
        # Arrange
        bindings = {
            "id": Scalar("42"),
            "tags": ListValue(("a", "b")),
            "q": MapValue((("k", "v"),)),
        }

        # Act
        result = expand("/items{/id}{;tags*}{?q*}", bindings)

        # Assert
        assert result == "/items/42;tags=a;tags=b?k=v"

    @pytest.mark.parametrize(
        "template,bindings,expected",
        [
            ("{/ids*}", {"ids": ListValue([1, 2])}, "/1/2"),
            ("{id}", {"id": Scalar(5)}, "5"),
            ("{?q*}", {"q": MapValue({"k": "v"})}, "?k=v"),
            ("{;q}", {"q": MapValue({1: 2})}, ";q=1,2"),
        ],
    )
    def test_explicit_values_with_loose_contents(
        self, template, bindings, expected
    ):
        # Act
        result = expand(template, bindings)

        # Assert
        assert result == expected

    def test_lone_surrogate_does_not_raise(self):
        assert expand("{x}", {"x": "\ud800"}) == "%ED%A0%80"

    def test_non_string_scalars_are_stringified(self):
        assert expand("{?page,size}", {"page": 2, "size": 10.5}) == "?page=2&size=10.5"

    def test_nested_composites_render_as_opaque_scalars(self):
        # Act
        result = expand("{list}", {"list": [["a", "b"], "c"]})

        # Assert
        assert result == "%5B%27a%27%2C%20%27b%27%5D,c"

    def test_tuple_is_a_list(self):
        assert expand("{/path*}", {"path": ("a", "b")}) == "/a/b"


class TestExpandExpression:
    def test_all_absent_renders_empty(self):
        # Arrange
        expression = parse_expression("?a,b")

        # Act
        result = expand_expression(expression, {})

        # Assert
        assert result == ""

    def test_joins_contributions_with_operator_joiner(self):
        # Arrange
        expression = parse_expression(".a,b")

        # Act
        result = expand_expression(expression, {"a": Scalar("x"), "b": Scalar("y")})

        # Assert
        assert result == ".x.y"
