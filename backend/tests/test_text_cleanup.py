from resume_ai.utils.text_cleanup import split_comma_separated, strip_code_fence


def test_strip_code_fence_removes_json_fence():
    assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'


def test_strip_code_fence_removes_bare_fence():
    assert strip_code_fence('  ```\n{"a": 1}\n```  ') == '{"a": 1}'


def test_strip_code_fence_leaves_plain_text():
    assert strip_code_fence('  {"a": "```"}\n') == '{"a": "```"}'


def test_split_comma_separated():
    assert split_comma_separated("React, Node.js,  Docker") == ["React", "Node.js", "Docker"]
    assert split_comma_separated("") == []
    assert split_comma_separated(" , ,") == []
