"""Tests for the prompt and error channels."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from rich.console import Console

from scaffoldkit.scaffolder.environment import (
    Environment,
    GeneratorError,
    Question,
    RichPrompter,
)

pytestmark = pytest.mark.unit


class TestPrompt:
    @pytest.mark.asyncio
    async def test_answers_by_name_in_order(self, make_prompter):
        prompter = make_prompter({"a": "1", "b": "2"})
        env = Environment(prompter)
        answers = await env.prompt([Question(name="b"), Question(name="a")])
        assert answers == {"b": "2", "a": "1"}
        assert prompter.asked_names == ["b", "a"]

    @pytest.mark.asyncio
    async def test_when_false_skips_question(self, make_prompter):
        prompter = make_prompter({"a": "1"})
        env = Environment(prompter)
        answers = await env.prompt([Question(name="a", when=lambda: False)])
        assert answers == {}
        assert prompter.asked == []

    @pytest.mark.asyncio
    async def test_reasks_until_valid(self, make_prompter):
        prompter = make_prompter({"port": ["http", "", "8080"]})
        env = Environment(prompter)
        answers = await env.prompt(
            [
                Question(
                    name="port",
                    validate=lambda v: v.isdigit() or ("Port must be numeric" if v else False),
                )
            ]
        )
        assert answers == {"port": "8080"}
        assert prompter.asked_names == ["port", "port", "port"]

    @pytest.mark.asyncio
    async def test_rejections_print_on_environment_console(self, make_prompter):
        console = Console(record=True, width=80)
        prompter = make_prompter({"port": ["http", "", "8080"]})
        env = Environment(prompter, console=console)
        with patch("scaffoldkit.utils.console") as shared:
            await env.prompt(
                [
                    Question(
                        name="port",
                        validate=lambda v: v.isdigit() or ("Port must be numeric" if v else False),
                    )
                ]
            )
        shared.print.assert_not_called()
        text = console.export_text()
        assert "Port must be numeric" in text
        assert "Please provide a valid value" in text

    @pytest.mark.asyncio
    async def test_async_validator_while_asking(self, make_prompter):
        async def validate(value):
            return value == "yes"

        prompter = make_prompter({"ok": ["no", "yes"]})
        env = Environment(prompter)
        answers = await env.prompt([Question(name="ok", validate=validate)])
        assert answers == {"ok": "yes"}

    @pytest.mark.asyncio
    async def test_non_interactive_takes_default(self, make_prompter):
        prompter = make_prompter({"color": "red"})
        env = Environment(prompter, interactive=False)
        answers = await env.prompt([Question(name="color", default=lambda: "blue")])
        assert answers == {"color": "blue"}
        assert prompter.asked == []

    @pytest.mark.asyncio
    async def test_plain_default(self, make_prompter):
        prompter = make_prompter()
        env = Environment(prompter)
        answers = await env.prompt([Question(name="color", default="teal")])
        assert answers == {"color": "teal"}
        assert prompter.asked == [("color", "teal")]


class TestError:
    def test_error_raises_generator_error(self, make_prompter):
        env = Environment(make_prompter())
        with pytest.raises(GeneratorError) as exc_info:
            env.error("Something broke")
        assert exc_info.value.message == "Something broke"
        assert str(exc_info.value) == "Something broke"


class TestRichPrompter:
    @pytest.mark.asyncio
    async def test_input_uses_prompt_with_string_default(self):
        prompter = RichPrompter()
        with patch("scaffoldkit.scaffolder.environment.Prompt.ask", return_value="typed") as ask:
            answer = await prompter.ask(Question(name="port", message="Port?"), 8080)
        assert answer == "typed"
        args, kwargs = ask.call_args
        assert args == ("Port?",)
        assert kwargs["default"] == "8080"

    @pytest.mark.asyncio
    async def test_confirm_uses_confirm(self):
        prompter = RichPrompter()
        with patch("scaffoldkit.scaffolder.environment.Confirm.ask", return_value=False) as ask:
            answer = await prompter.ask(Question(name="typescript", type="confirm"), True)
        assert answer is False
        args, kwargs = ask.call_args
        assert args == ("typescript",)
        assert kwargs["default"] is True

    @pytest.mark.asyncio
    async def test_no_default_is_not_passed(self):
        prompter = RichPrompter()
        with patch("scaffoldkit.scaffolder.environment.Prompt.ask", return_value="x") as ask:
            await prompter.ask(Question(name="name"), None)
        assert "default" not in ask.call_args.kwargs
