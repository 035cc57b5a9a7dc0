
from mp3metadata import (
    CustomGenre,
    FieldKind,
    Fields,
    Genre,
    OptionalAudioTags,
    Url,
)
from mp3metadata.id3v2 import (
    ID3BadExtendedHeader,
    ID3Header,
    ID3NoHeaderError,
    ID3UnsupportedVersionError,
    iter_frames,
    parse_genres,
    read_tag,
    skip_apev2,
)

from tests import TestCase
from tests._streams import (
    apev2_block,
    id3v2_frame,
    id3v2_tag,
    syncsafe,
    text,
)


class TID3Header(TestCase):

    def test_basic(self):
        header = ID3Header(b"ID3\x03\x00\x00" + syncsafe(257))
        self.assertEqual(header.version, (2, 3, 0))
        self.assertEqual(header.major_version, 3)
        self.assertEqual(header.minor_version, 0)
        self.assertEqual(header.size, 257)
        self.assertEqual(header.end, 267)
        self.assertFalse(header.f_unsynch)
        self.assertFalse(header.f_extended)
        self.assertFalse(header.f_footer)

    def test_offset(self):
        header = ID3Header(b"xx" + id3v2_tag(b"\x00" * 5), 2)
        self.assertEqual(header.end, 17)

    def test_footer(self):
        header = ID3Header(id3v2_tag(b"", major=4, footer=True))
        self.assertTrue(header.f_footer)
        self.assertEqual(header.end, 20)

    def test_footer_flag_v23(self):
        header = ID3Header(b"ID3\x03\x00\x10" + syncsafe(0))
        self.assertFalse(header.f_footer)
        self.assertEqual(header.end, 10)

    def test_flags(self):
        header = ID3Header(b"ID3\x04\x00\xc0" + syncsafe(0))
        self.assertTrue(header.f_unsynch)
        self.assertTrue(header.f_extended)

    def test_no_header(self):
        self.assertRaises(ID3NoHeaderError, ID3Header, b"ID3\x03")
        self.assertRaises(ID3NoHeaderError, ID3Header, b"\x00" * 10)

    def test_unsupported(self):
        self.assertRaises(
            ID3UnsupportedVersionError, ID3Header,
            b"ID3\x05\x00\x00" + syncsafe(0))

    def test_extended_header_v24(self):
        header = ID3Header(b"ID3\x04\x00\x40" + syncsafe(0))
        self.assertEqual(
            header.extended_header_size(syncsafe(6) + b"\x01\x00rest"), 6)

    def test_extended_header_v23(self):
        header = ID3Header(b"ID3\x03\x00\x40" + syncsafe(0))
        body = b"\x00\x00\x00\x06" + b"\x00" * 6 + b"rest"
        self.assertEqual(header.extended_header_size(body), 10)

    def test_extended_header_bad(self):
        header = ID3Header(b"ID3\x04\x00\x40" + syncsafe(0))
        self.assertRaises(
            ID3BadExtendedHeader, header.extended_header_size, b"\x00")
        self.assertRaises(
            ID3BadExtendedHeader, header.extended_header_size, syncsafe(2))
        self.assertRaises(
            ID3BadExtendedHeader, header.extended_header_size,
            syncsafe(100) + b"\x00" * 10)


class TParseGenres(TestCase):

    def test_references(self):
        self.assertEqual(
            parse_genres("(51)(39)"),
            [Genre.TECHNO_INDUSTRIAL, Genre.NOISE])

    def test_number(self):
        self.assertEqual(parse_genres("12"), [Genre.OTHER])

    def test_custom(self):
        self.assertEqual(parse_genres("Foobar"), [CustomGenre("Foobar")])

    def test_empty(self):
        self.assertEqual(parse_genres(""), [])

    def test_parens_without_numbers(self):
        self.assertEqual(parse_genres("(RX)"), [CustomGenre("(RX)")])

    def test_out_of_range_reference(self):
        self.assertEqual(parse_genres("(300)(1)"), [Genre.CLASSIC_ROCK])


class TIterFrames(TestCase):

    def test_v23(self):
        body = (id3v2_frame("TIT2", b"\x00a") +
                id3v2_frame("TALB", b"\x00b") + b"\x00" * 20)
        self.assertEqual(
            list(iter_frames(body, 3)),
            [("TIT2", b"\x00a"), ("TALB", b"\x00b")])

    def test_v24_syncsafe_size(self):
        payload = b"\x00" + b"x" * 200
        body = id3v2_frame("TIT2", payload, major=4)
        self.assertEqual(list(iter_frames(body, 4)), [("TIT2", payload)])

    def test_v23_plain_size(self):
        payload = b"\x00" + b"x" * 200
        body = id3v2_frame("TIT2", payload, major=3)
        self.assertEqual(list(iter_frames(body, 3)), [("TIT2", payload)])

    def test_v22(self):
        body = id3v2_frame("TT2", b"\x00a", major=2)
        self.assertEqual(list(iter_frames(body, 2)), [("TT2", b"\x00a")])

    def test_overrun(self):
        body = id3v2_frame("TIT2", b"\x00abc")[:-1]
        self.assertEqual(list(iter_frames(body, 3)), [])

    def test_invalid_id(self):
        body = id3v2_frame("tit2", b"\x00a") + id3v2_frame("TALB", b"\x00b")
        self.assertEqual(list(iter_frames(body, 3)), [])

    def test_too_short_for_header(self):
        self.assertEqual(list(iter_frames(b"TIT2\x00", 3)), [])


class TSkipAPEv2(TestCase):

    def test_header(self):
        data = apev2_block(b"x" * 10)
        self.assertEqual(skip_apev2(data, 0), len(data))

    def test_footer(self):
        data = b"abc" + apev2_block(header=False)
        self.assertEqual(skip_apev2(data, 3), len(data))

    def test_short(self):
        self.assertEqual(skip_apev2(b"APETAGEX\x00\x00", 0), 8)


class TReadTag(TestCase):

    def test_no_tag(self):
        self.assertEqual(read_tag(b"\x00" * 20, 0), (0, None))
        self.assertEqual(read_tag(b"xxID3", 2), (2, None))
        self.assertEqual(read_tag(b"", 0), (0, None))

    def test_text_fields(self):
        body = (id3v2_frame("TIT2", text("Title")) +
                id3v2_frame("TPE1", text("A/B")) +
                id3v2_frame("TRCK", text("4/9")) +
                id3v2_frame("TCON", text("(51)(39)")))
        data = id3v2_tag(body)
        end, tags = read_tag(data, 0, 7)
        self.assertEqual(end, len(data))
        self.assertEqual(tags.title, "Title")
        self.assertEqual(tags.performers, ["A", "B"])
        self.assertEqual(tags.track_number, "4/9")
        self.assertEqual(
            tags.content_type, [Genre.TECHNO_INDUSTRIAL, Genre.NOISE])
        self.assertEqual(tags.position, 7)
        self.assertEqual(tags.major_version, 3)
        self.assertEqual(tags.minor_version, 0)

    def test_urls(self):
        body = (id3v2_frame("WOAR", b"http://a/") +
                id3v2_frame("WOAR", b"http://b/\x00") +
                id3v2_frame("WPAY", b"http://pay/") +
                id3v2_frame("WPAY", b"http://other/"))
        tags = read_tag(id3v2_tag(body), 0)[1]
        self.assertEqual(tags.official_artist_webpage,
                         [Url("http://a/"), Url("http://b/")])
        self.assertEqual(tags.payment_url, "http://pay/")
        self.assertTrue(isinstance(tags.payment_url, Url))

    def test_single_first_wins(self):
        body = (id3v2_frame("TIT2", text("first")) +
                id3v2_frame("TIT2", text("second")))
        tags = read_tag(id3v2_tag(body), 0)[1]
        self.assertEqual(tags.title, "first")

    def test_lists_accumulate(self):
        body = (id3v2_frame("TCOM", text("a/b")) +
                id3v2_frame("TCOM", text("c")) +
                id3v2_frame("TCON", text("Rock")) +
                id3v2_frame("TCON", text("12")))
        tags = read_tag(id3v2_tag(body), 0)[1]
        self.assertEqual(tags.composers, ["a", "b", "c"])
        self.assertEqual(
            tags.content_type, [CustomGenre("Rock"), Genre.OTHER])

    def test_encodings(self):
        body = (id3v2_frame("TIT2", text("t\xe9", 1), major=4) +
                id3v2_frame("TALB", text("☃", 2), major=4) +
                id3v2_frame("TPE2", text("b\xe4nd", 3), major=4) +
                id3v2_frame("TPE3", text("c\xf6n", 0), major=4))
        tags = read_tag(id3v2_tag(body, major=4), 0)[1]
        self.assertEqual(tags.title, "t\xe9")
        self.assertEqual(tags.album_movie_show, "☃")
        self.assertEqual(tags.band, "b\xe4nd")
        self.assertEqual(tags.conductor, "c\xf6n")

    def test_unknown_encoding_ignored(self):
        body = (id3v2_frame("TIT2", b"\x09abc") +
                id3v2_frame("TIT2", text("ok")))
        tags = read_tag(id3v2_tag(body), 0)[1]
        self.assertEqual(tags.title, "ok")

    def test_short_frame_ignored(self):
        body = id3v2_frame("TIT2", b"\x00") + id3v2_frame("TALB", b"")
        data = id3v2_tag(body)
        self.assertEqual(read_tag(data, 0), (len(data), None))

    def test_unknown_frames_only(self):
        body = (id3v2_frame("APIC", b"\x00" * 50) +
                id3v2_frame("COMM", b"\x00eng\x00hi"))
        data = id3v2_tag(body)
        self.assertEqual(read_tag(data, 0), (len(data), None))

    def test_unknown_frames_skipped(self):
        body = (id3v2_frame("APIC", b"\x00" * 50) +
                id3v2_frame("TIT2", text("after")))
        self.assertEqual(read_tag(id3v2_tag(body), 0)[1].title, "after")

    def test_v22_aliases(self):
        body = (id3v2_frame("TT2", text("Title"), major=2) +
                id3v2_frame("TAL", text("Album"), major=2) +
                id3v2_frame("TP1", text("Artist"), major=2) +
                id3v2_frame("TCO", text("(17)"), major=2) +
                id3v2_frame("WAR", b"http://artist/", major=2))
        tags = read_tag(id3v2_tag(body, major=2), 0)[1]
        self.assertEqual(tags.major_version, 2)
        self.assertEqual(tags.title, "Title")
        self.assertEqual(tags.album_movie_show, "Album")
        self.assertEqual(tags.performers, ["Artist"])
        self.assertEqual(tags.content_type, [Genre.ROCK])
        self.assertEqual(tags.official_artist_webpage, ["http://artist/"])

    def test_tit(self):
        body = id3v2_frame("TIT", text("Title"), major=2)
        self.assertEqual(
            read_tag(id3v2_tag(body, major=2), 0)[1].title, "Title")

    def test_footer(self):
        body = id3v2_frame("TIT2", text("x"), major=4)
        data = id3v2_tag(body, major=4, footer=True)
        end, tags = read_tag(data + b"\xff", 0)
        self.assertEqual(end, len(data))
        self.assertEqual(tags.title, "x")

    def test_truncated(self):
        data = id3v2_tag(id3v2_frame("TIT2", text("title")))
        self.assertEqual(read_tag(data[:-3], 0), (len(data), None))

    def test_unsupported_version(self):
        data = b"ID3\x05\x00\x00" + syncsafe(0)
        self.assertEqual(read_tag(data, 0), (0, None))

    def test_extended_header_v23(self):
        ext = b"\x00\x00\x00\x06" + b"\x00" * 6
        body = ext + id3v2_frame("TIT2", text("ext"))
        tags = read_tag(id3v2_tag(body, flags=0x40), 0)[1]
        self.assertEqual(tags.title, "ext")

    def test_extended_header_v24(self):
        ext = syncsafe(6) + b"\x01\x00"
        body = ext + id3v2_frame("TIT2", text("ext"), major=4)
        tags = read_tag(id3v2_tag(body, major=4, flags=0x40), 0)[1]
        self.assertEqual(tags.title, "ext")

    def test_extended_header_malformed(self):
        body = syncsafe(1000) + id3v2_frame("TIT2", text("x"), major=4)
        data = id3v2_tag(body, major=4, flags=0x40)
        self.assertEqual(read_tag(data, 0), (len(data), None))

    def test_unsynchronised(self):
        frame = id3v2_frame("TIT2", b"\x00a\xffb")
        data = id3v2_tag(frame.replace(b"\xff", b"\xff\x00"), flags=0x80)
        end, tags = read_tag(data, 0)
        self.assertEqual(end, len(data))
        self.assertEqual(tags.title, "a\xffb")

    def test_unsynchronised_sizes_after_decoding(self):
        body = (id3v2_frame("TIT2", b"\x00a\xff\xff") +
                id3v2_frame("TALB", b"\x00\xffb"))
        data = id3v2_tag(body.replace(b"\xff", b"\xff\x00"), flags=0x80)
        tags = read_tag(data, 0)[1]
        self.assertEqual(tags.title, "a\xff\xff")
        self.assertEqual(tags.album_movie_show, "\xffb")

    def test_apev2(self):
        data = apev2_block(b"x" * 40) + b"rest"
        self.assertEqual(read_tag(data, 0), (len(data) - 4, None))

    def test_known_fields(self):
        body = (id3v2_frame("TIT2", text("Title")) +
                id3v2_frame("TXXX", text("custom")))
        known = {"TXXX": (FieldKind.TEXT, "title")}
        tags = read_tag(id3v2_tag(body), 0, known_fields=known)[1]
        self.assertEqual(tags.title, "custom")

    def test_catalogue(self):
        tags = OptionalAudioTags()
        for frame_id, (kind, attr) in Fields.items():
            self.assertTrue(hasattr(tags, attr), frame_id)
            self.assertTrue(isinstance(kind, FieldKind))
        self.assertEqual(Fields["TIT"], Fields["TIT2"])
        self.assertEqual(Fields["TCON"], (FieldKind.GENRES, "content_type"))
        self.assertEqual(Fields["WOAR"][0], FieldKind.URL_LIST)
