"""
Golden split/join tables for IRC line parsing and rendering.

Taken from the ircdocs parser-tests suite (msg-split.yaml / msg-join.yaml)
plus the CRLF and prefix-only edge cases.
"""

# (input line, tags, (name, user, host), command, params)
SPLIT_CASES = [
    ("foo bar baz asdf", {}, ("", "", ""), "FOO", ["bar", "baz", "asdf"]),
    (":coolguy foo bar baz asdf", {}, ("coolguy", "", ""), "FOO", ["bar", "baz", "asdf"]),
    (":coolguy foo bar baz :asdf quux", {}, ("coolguy", "", ""), "FOO", ["bar", "baz", "asdf quux"]),
    (":coolguy foo bar baz :", {}, ("coolguy", "", ""), "FOO", ["bar", "baz", ""]),
    (":coolguy foo bar baz ::asdf", {}, ("coolguy", "", ""), "FOO", ["bar", "baz", ":asdf"]),
    (":coolguy foo bar baz :  asdf quux ", {}, ("coolguy", "", ""), "FOO", ["bar", "baz", "  asdf quux "]),
    (":coolguy PRIVMSG bar :lol :) ", {}, ("coolguy", "", ""), "PRIVMSG", ["bar", "lol :) "]),
    (":coolguy foo bar baz :  ", {}, ("coolguy", "", ""), "FOO", ["bar", "baz", "  "]),
    (
        "@a=b;c=32;k;rt=ql7 foo",
        {"a": "b", "c": "32", "k": "", "rt": "ql7"},
        ("", "", ""),
        "FOO",
        [],
    ),
    (
        "@a=b\\\\and\\nk;c=72\\s45;d=gh\\:764 foo",
        {"a": "b\\and\nk", "c": "72 45", "d": "gh;764"},
        ("", "", ""),
        "FOO",
        [],
    ),
    ("@c;h=;a=b :quux ab cd", {"c": "", "h": "", "a": "b"}, ("quux", "", ""), "AB", ["cd"]),
    (":src JOIN #chan", {}, ("src", "", ""), "JOIN", ["#chan"]),
    (":src JOIN :#chan", {}, ("src", "", ""), "JOIN", ["#chan"]),
    (":src AWAY", {}, ("src", "", ""), "AWAY", []),
    (":src AWAY ", {}, ("src", "", ""), "AWAY", []),
    (":cool\tguy foo bar baz", {}, ("cool\tguy", "", ""), "FOO", ["bar", "baz"]),
    (
        ":coolguy!ag@net\x035w\x03ork.admin PRIVMSG foo :bar baz",
        {},
        ("coolguy", "ag", "net\x035w\x03ork.admin"),
        "PRIVMSG",
        ["foo", "bar baz"],
    ),
    (
        ":coolguy!~ag@n\x02et\x0305w\x0fork.admin PRIVMSG foo :bar baz",
        {},
        ("coolguy", "~ag", "n\x02et\x0305w\x0fork.admin"),
        "PRIVMSG",
        ["foo", "bar baz"],
    ),
    (
        "@tag1=value1;tag2;vendor1/tag3=value2;vendor2/tag4= "
        ":irc.example.com COMMAND param1 param2 :param3 param3",
        {"tag1": "value1", "tag2": "", "vendor1/tag3": "value2", "vendor2/tag4": ""},
        ("irc.example.com", "", ""),
        "COMMAND",
        ["param1", "param2", "param3 param3"],
    ),
    (
        "@tag1=value1;tag2;vendor1/tag3=value2;vendor2/tag4 "
        "COMMAND param1 param2 :param3 param3",
        {"tag1": "value1", "tag2": "", "vendor1/tag3": "value2", "vendor2/tag4": ""},
        ("", "", ""),
        "COMMAND",
        ["param1", "param2", "param3 param3"],
    ),
    (
        "@foo=\\\\\\\\\\:\\\\s\\s\\r\\n COMMAND",
        {"foo": "\\\\;\\s \r\n"},
        ("", "", ""),
        "COMMAND",
        [],
    ),
    (":gravel.mozilla.org MODE #tckk +n ", {}, ("gravel.mozilla.org", "", ""), "MODE", ["#tckk", "+n"]),
    (
        ":services.esper.net MODE #foo-bar +o foobar  ",
        {},
        ("services.esper.net", "", ""),
        "MODE",
        ["#foo-bar", "+o", "foobar"],
    ),
    ("@tag1=value\\\\ntest COMMAND", {"tag1": "value\\ntest"}, ("", "", ""), "COMMAND", []),
    ("@tag1=value\\1 COMMAND", {"tag1": "value1"}, ("", "", ""), "COMMAND", []),
    ("@tag1=value1\\ COMMAND", {"tag1": "value1"}, ("", "", ""), "COMMAND", []),
    ("@tag1=1;tag2=3;tag3=4;tag1=5 COMMAND", {"tag1": "5", "tag2": "3", "tag3": "4"}, ("", "", ""), "COMMAND", []),
    (
        "@tag1=1;tag2=3;tag3=4;tag1=5;vendor/tag2=8 COMMAND",
        {"tag1": "5", "tag2": "3", "tag3": "4", "vendor/tag2": "8"},
        ("", "", ""),
        "COMMAND",
        [],
    ),
    (":SomeOp MODE #channel :+i", {}, ("SomeOp", "", ""), "MODE", ["#channel", "+i"]),
    (
        ":SomeOp MODE #channel +oo SomeUser :AnotherUser",
        {},
        ("SomeOp", "", ""),
        "MODE",
        ["#channel", "+oo", "SomeUser", "AnotherUser"],
    ),
    ("COMMAND with utf-8 param €", {}, ("", "", ""), "COMMAND", ["with", "utf-8", "param", "€"]),
    ("COMMAND with crlf\r\n", {}, ("", "", ""), "COMMAND", ["with", "crlf"]),
    (":prefix-name-with-crlf\r\n", {}, ("prefix-name-with-crlf", "", ""), "", []),
    (":!prefix-user-with-crlf\r\n", {}, ("", "prefix-user-with-crlf", ""), "", []),
    (":@prefix-host-with-crlf\r\n", {}, ("", "", "prefix-host-with-crlf"), "", []),
    ("", {}, ("", "", ""), "", []),
    (":test", {}, ("test", "", ""), "", []),
    (":!", {}, ("", "", ""), "", []),
]

# (tags, (name, user, host), command, params, allowed renderings)
JOIN_CASES = [
    ({}, ("", "", ""), "FOO", ["bar", "baz", "asdf"], ["FOO bar baz asdf", "FOO bar baz :asdf"]),
    ({}, ("src", "", ""), "AWAY", [], [":src AWAY"]),
    ({}, ("src", "", ""), "AWAY", [""], [":src AWAY :"]),
    (
        {},
        ("coolguy", "", ""),
        "FOO",
        ["bar", "baz", "asdf"],
        [":coolguy FOO bar baz asdf", ":coolguy FOO bar baz :asdf"],
    ),
    ({}, ("coolguy", "", ""), "FOO", ["bar", "baz", "asdf quux"], [":coolguy FOO bar baz :asdf quux"]),
    ({}, ("", "", ""), "FOO", ["bar", "baz", ""], ["FOO bar baz :"]),
    ({}, ("", "", ""), "FOO", ["bar", "baz", ":asdf"], ["FOO bar baz ::asdf"]),
    ({}, ("coolguy", "", ""), "FOO", ["bar", "baz", "  asdf quux "], [":coolguy FOO bar baz :  asdf quux "]),
    ({}, ("coolguy", "", ""), "PRIVMSG", ["bar", "lol :) "], [":coolguy PRIVMSG bar :lol :) "]),
    ({}, ("coolguy", "", ""), "FOO", ["bar", "baz", "  "], [":coolguy FOO bar baz :  "]),
    (
        {},
        ("coolguy", "", ""),
        "FOO",
        ["b\tar", "baz"],
        [":coolguy FOO b\tar baz", ":coolguy FOO b\tar :baz"],
    ),
    ({"asd": ""}, ("coolguy", "", ""), "FOO", ["bar", "baz", "  "], ["@asd :coolguy FOO bar baz :  "]),
    (
        {"a": "b\\and\nk", "d": "gh;764"},
        ("", "", ""),
        "FOO",
        [],
        ["@a=b\\\\and\\nk;d=gh\\:764 FOO", "@d=gh\\:764;a=b\\\\and\\nk FOO"],
    ),
    (
        {"a": "b\\and\nk", "d": "gh;764"},
        ("", "", ""),
        "FOO",
        ["par1", "par2"],
        [
            "@a=b\\\\and\\nk;d=gh\\:764 FOO par1 par2",
            "@a=b\\\\and\\nk;d=gh\\:764 FOO par1 :par2",
            "@d=gh\\:764;a=b\\\\and\\nk FOO par1 par2",
            "@d=gh\\:764;a=b\\\\and\\nk FOO par1 :par2",
        ],
    ),
    ({"foo": "\\\\;\\s \r\n"}, ("", "", ""), "COMMAND", [], ["@foo=\\\\\\\\\\:\\\\s\\s\\r\\n COMMAND"]),
]
