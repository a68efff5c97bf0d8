from datetime import datetime, timezone

from kasyno.replies import Button, Embed, Reply, argument_count_error, argument_parse_error


def test_add_field_appends_and_chains():
    embed = Embed(title="t")
    returned = embed.add_field("Gotówka", "`5` 💵", True)
    assert returned is embed
    assert [(f.name, f.value, f.inline) for f in embed.fields] == [("Gotówka", "`5` 💵", True)]


def test_add_field_keeps_order():
    embed = Embed().add_field("a", "1").add_field("b", "2")
    assert [f.name for f in embed.fields] == ["a", "b"]
    assert all(not f.inline for f in embed.fields)


def test_render_includes_title_description_and_fields():
    embed = Embed(title="🏓 Pong!", description="Opóźnienie: 3 ms").add_field("Kwota", "10")
    text = Reply(embed=embed).render()
    lines = text.split("\n")
    assert lines[0] == "🏓 Pong!"
    assert "Opóźnienie: 3 ms" in lines
    assert "Kwota: 10" in lines


def test_render_content_only():
    reply = Reply(content="Nie możesz okraść samego siebie, geniuszu.")
    assert reply.render() == "Nie możesz okraść samego siebie, geniuszu."


def test_render_buttons_and_disabled_state():
    reply = Reply(
        content="x",
        buttons=[Button("hit", "Dobierz"), Button("stand", "Pasuj", disabled=True)],
    )
    last = reply.render().split("\n")[-1]
    assert "[Dobierz]" in last
    assert "[Pasuj]" not in last
    assert "Pasuj" in last


def test_render_timestamp_and_footer():
    moment = datetime(2024, 1, 2, tzinfo=timezone.utc)
    embed = Embed(title="top", footer="stopka", timestamp=moment)
    text = Reply(embed=embed).render()
    assert "stopka" in text
    assert moment.isoformat() in text


def test_argument_count_error_title():
    reply = argument_count_error()
    assert reply.embed.title == "🤨 Coś za mało tych argumentów"
    assert reply.embed.description.startswith("Weź. Nie baw się ze mną.")


def test_argument_parse_error_title():
    reply = argument_parse_error()
    assert reply.embed.title == "🤦🏻 Nie umiem czytać"
    assert "Coś ty za argument dał?" in reply.render()