"""Tests for playerctl output parsing."""

from urllib.parse import quote

import pytest

from playerctl_wrapper.domain.playback.exceptions import (
    CommandError,
    ParseLengthError,
    ParseUrlError,
    PlayerctlOtherError,
)
from playerctl_wrapper.domain.playback.models import TrackStatus
from playerctl_wrapper.domain.playback.parser import (
    check_success,
    decode_stdout,
    parse_metadata,
    parse_positions,
    parse_status,
    parse_unsigned,
    percent_decode,
    split_metadata_line,
)
from playerctl_wrapper.domain.playback.runner import CompletedInvocation


class TestCheckSuccess:
    """Tests for exit status classification."""

    def test_zero_exit_passes(self) -> None:
        check_success(CompletedInvocation(0, b"", b""))

    def test_non_zero_exit_raises_command_error(self) -> None:
        """CommandError carries the status code and stderr verbatim."""
        result = CompletedInvocation(1, b"", b"No players found")
        with pytest.raises(CommandError) as exc_info:
            check_success(result)

        assert exc_info.value.returncode == 1
        assert exc_info.value.stderr == "No players found"
        assert "No players found" in str(exc_info.value)

    def test_undecodable_stderr_is_replaced(self) -> None:
        result = CompletedInvocation(2, b"", b"bad \xff byte")
        with pytest.raises(CommandError) as exc_info:
            check_success(result)

        assert exc_info.value.stderr.startswith("bad ")


class TestDecodeStdout:
    """Tests for stdout decoding."""

    def test_returns_text(self) -> None:
        assert decode_stdout(CompletedInvocation(0, b"Playing\n", b"")) == "Playing\n"

    def test_checks_exit_status_first(self) -> None:
        with pytest.raises(CommandError):
            decode_stdout(CompletedInvocation(1, b"Playing", b"oops"))

    def test_invalid_utf8_raises_other_error(self) -> None:
        with pytest.raises(PlayerctlOtherError):
            decode_stdout(CompletedInvocation(0, b"\xff\xfe", b""))


class TestParseStatus:
    """Tests for status text mapping."""

    def test_playing_with_newline(self) -> None:
        assert parse_status("Playing\n") == TrackStatus.PLAYING

    def test_paused(self) -> None:
        assert parse_status("Paused") == TrackStatus.PAUSED

    def test_stopped(self) -> None:
        assert parse_status("Stopped\n") == TrackStatus.STOPPED

    @pytest.mark.parametrize("text", ["", "Foo", "playing", "  \n"])
    def test_unrecognised_text_is_stopped(self, text: str) -> None:
        """Anything other than exactly Playing/Paused collapses to STOPPED."""
        assert parse_status(text) == TrackStatus.STOPPED

    def test_idempotent(self) -> None:
        assert parse_status("Paused\n") == parse_status("Paused\n")


class TestParseUnsigned:
    """Tests for unsigned integer parsing."""

    def test_plain_integer(self) -> None:
        assert parse_unsigned("5000000") == 5000000

    def test_surrounding_whitespace_allowed(self) -> None:
        assert parse_unsigned(" 42\r") == 42

    def test_max_u64(self) -> None:
        assert parse_unsigned(str(2**64 - 1)) == 2**64 - 1

    @pytest.mark.parametrize(
        "text", ["abc", "", "-1", "+5", "1.5", "1_000", "2e6", str(2**64)]
    )
    def test_invalid_raises(self, text: str) -> None:
        with pytest.raises(ParseLengthError) as exc_info:
            parse_unsigned(text)

        assert exc_info.value.text == text


class TestPercentDecode:
    """Tests for strict percent-decoding."""

    def test_decodes_escapes(self) -> None:
        assert (
            percent_decode("file:///music/My%20Song%20%26%20More.mp3")
            == "file:///music/My Song & More.mp3"
        )

    def test_plus_is_not_a_space(self) -> None:
        assert percent_decode("a+b") == "a+b"

    def test_utf8_sequences(self) -> None:
        assert percent_decode("%E6%97%A5%E6%9C%AC") == "日本"

    @pytest.mark.parametrize(
        "original",
        [
            "https://example.com/a b?x=1&y=2",
            "100% pure",
            "file:///home/user/Music/Artist - Title (Remix).flac",
            "日本語 タイトル",
        ],
    )
    def test_round_trip(self, original: str) -> None:
        """Encoding then decoding yields the original string."""
        assert percent_decode(quote(original, safe="")) == original

    @pytest.mark.parametrize("value", ["abc%2", "%", "%zz", "x%g1y"])
    def test_malformed_escape_raises(self, value: str) -> None:
        with pytest.raises(ParseUrlError) as exc_info:
            percent_decode(value)

        assert exc_info.value.value == value

    def test_invalid_utf8_raises(self) -> None:
        with pytest.raises(ParseUrlError):
            percent_decode("%FF%FE")


class TestParsePositions:
    """Tests for position query parsing."""

    def test_two_players(self) -> None:
        result = parse_positions("mpv;-;12345\nfirefox;-;9999\n")
        assert result == {"mpv": 12345, "firefox": 9999}

    def test_line_without_delimiter_skipped(self) -> None:
        """Malformed lines do not affect other entries."""
        result = parse_positions("mpv;-;12345\nNo delimiter here\nfirefox;-;9999")
        assert result == {"mpv": 12345, "firefox": 9999}

    def test_invalid_position_raises(self) -> None:
        with pytest.raises(ParseLengthError):
            parse_positions("mpv;-;abc")

    def test_last_write_wins(self) -> None:
        assert parse_positions("mpv;-;1\nmpv;-;2\n") == {"mpv": 2}

    def test_splits_on_first_delimiter(self) -> None:
        with pytest.raises(ParseLengthError):
            parse_positions("mpv;-;1;-;2")

    def test_custom_delimiter(self) -> None:
        assert parse_positions("mpv|100", delimiter="|") == {"mpv": 100}

    def test_empty_output(self) -> None:
        assert parse_positions("") == {}


class TestSplitMetadataLine:
    """Tests for metadata line splitting."""

    def test_value_keeps_embedded_spaces(self) -> None:
        assert split_metadata_line("mpv xesam:title Song A") == (
            "mpv",
            "xesam:title",
            "Song A",
        )

    def test_padded_key_column(self) -> None:
        """playerctl pads the key column; padding is trimmed from the value."""
        assert split_metadata_line("spotify xesam:artist         Some Band") == (
            "spotify",
            "xesam:artist",
            "Some Band",
        )

    def test_line_without_spaces(self) -> None:
        assert split_metadata_line("garbage") is None

    def test_line_without_value(self) -> None:
        assert split_metadata_line("mpv xesam:title") is None

    def test_empty_line(self) -> None:
        assert split_metadata_line("") is None


class TestParseMetadata:
    """Tests for multi-player metadata parsing."""

    SAMPLE = (
        "mpv mpris:length 5000000\n"
        "mpv xesam:title Song A\n"
        "firefox xesam:title Song B\n"
    )

    def test_two_players(self) -> None:
        result = parse_metadata(self.SAMPLE)

        assert set(result) == {"mpv", "firefox"}
        assert result["mpv"].length == 5000000
        assert result["mpv"].title == "Song A"
        assert result["firefox"].title == "Song B"
        assert result["firefox"].length is None

    def test_raw_map_holds_pairs_verbatim(self) -> None:
        result = parse_metadata(self.SAMPLE)

        assert result["mpv"].raw == {
            "mpris:length": "5000000",
            "xesam:title": "Song A",
        }
        assert result["firefox"].raw == {"xesam:title": "Song B"}

    def test_all_known_keys(self) -> None:
        output = "\n".join(
            [
                "spotify mpris:trackid      spotify:track:abc123",
                "spotify mpris:artUrl       https://i.scdn.co/image/a%20b",
                "spotify mpris:length       215000000",
                "spotify xesam:album        The Album",
                "spotify xesam:albumArtist  Album Artist",
                "spotify xesam:artist       Track Artist",
                "spotify xesam:contentCreated 2020-01-01T00:00:00",
                "spotify xesam:title        The Title",
                "spotify xesam:url          https://open.spotify.com/track/abc%3F",
            ]
        )
        metadata = parse_metadata(output)["spotify"]

        assert metadata.track_id == "spotify:track:abc123"
        assert metadata.art_url == "https://i.scdn.co/image/a b"
        assert metadata.length == 215000000
        assert metadata.album == "The Album"
        assert metadata.album_artist == "Album Artist"
        assert metadata.artist == "Track Artist"
        assert metadata.content_created == "2020-01-01T00:00:00"
        assert metadata.title == "The Title"
        assert metadata.url == "https://open.spotify.com/track/abc?"
        assert len(metadata.raw) == 9

    def test_raw_map_keeps_encoded_url(self) -> None:
        metadata = parse_metadata("mpv xesam:url file:///a%20b.mp3")["mpv"]

        assert metadata.url == "file:///a b.mp3"
        assert metadata.raw["xesam:url"] == "file:///a%20b.mp3"

    def test_unknown_key_only_in_raw(self) -> None:
        """Unrecognised keys populate raw but no typed field."""
        metadata = parse_metadata("vlc vlc:publisher Someone\n")["vlc"]

        assert metadata.raw == {"vlc:publisher": "Someone"}
        assert metadata.title is None
        assert metadata.artist is None
        assert metadata.length is None

    def test_malformed_lines_skipped(self) -> None:
        output = "\nmpv\nmpv xesam:title\nmpv xesam:title Song A\n"
        result = parse_metadata(output)

        assert list(result) == ["mpv"]
        assert result["mpv"].raw == {"xesam:title": "Song A"}

    def test_invalid_length_aborts(self) -> None:
        with pytest.raises(ParseLengthError):
            parse_metadata("mpv xesam:title Song\nmpv mpris:length soon\n")

    def test_invalid_url_aborts(self) -> None:
        with pytest.raises(ParseUrlError):
            parse_metadata("mpv xesam:title Song\nmpv xesam:url file:///a%2\n")

    def test_repeated_key_last_write_wins(self) -> None:
        metadata = parse_metadata("mpv xesam:title One\nmpv xesam:title Two\n")["mpv"]

        assert metadata.title == "Two"
        assert metadata.raw == {"xesam:title": "Two"}

    def test_players_keep_first_seen_order(self) -> None:
        output = "b xesam:title x\na xesam:title y\nb xesam:album z\n"
        assert list(parse_metadata(output)) == ["b", "a"]

    def test_crlf_line_endings(self) -> None:
        metadata = parse_metadata("mpv xesam:title Song A\r\nmpv mpris:length 7\r\n")
        assert metadata["mpv"].title == "Song A"
        assert metadata["mpv"].length == 7

    def test_length_seconds(self) -> None:
        metadata = parse_metadata("mpv mpris:length 2500000")["mpv"]
        assert metadata.length_seconds == 2.5

    def test_empty_output(self) -> None:
        assert parse_metadata("") == {}
