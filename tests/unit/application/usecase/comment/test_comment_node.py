"""Unit tests for CommentNode conversion and encoding."""

import json

from discuss.application.usecase.comment import CommentNode, dump_thread_json
from discuss.domain.service import AnnotatedComment
from tests.conftest import at, make_comment, make_post, make_user


def _annotated(comment, **kwargs):
    return AnnotatedComment.from_comment(comment, **kwargs)


class TestFromForest:
    """Tests for CommentNode.from_forest."""

    def test_keeps_order_nesting_and_annotations(self):
        # Arrange
        post = make_post()
        author = make_user("Mauro")
        root = _annotated(make_comment(post, author, "root", created_at=at(0)), like_count=2)
        reply = _annotated(
            make_comment(post, author, "reply", created_at=at(5)), liked_by_me=True
        )
        root.children.append(reply)
        other = _annotated(make_comment(post, author, "other", created_at=at(9)))

        # Act
        nodes = CommentNode.from_forest([other, root])

        # Assert
        assert [n.message for n in nodes] == ["other", "root"]
        assert nodes[1].like_count == 2
        assert [c.message for c in nodes[1].children] == ["reply"]
        assert nodes[1].children[0].liked_by_me is True
        assert nodes[1].author.name == "Mauro"

    def test_json_shape(self):
        post = make_post()
        author = make_user("Ada")
        comment = make_comment(post, author, "hi", created_at=at(0))

        data = CommentNode.from_forest([_annotated(comment)])[0].model_dump(mode="json")

        assert set(data) == {
            "id",
            "post_id",
            "parent_id",
            "message",
            "author",
            "created_at",
            "like_count",
            "liked_by_me",
            "children",
        }
        assert data["author"] == {"id": str(author.id), "name": "Ada"}

    def test_deep_chain_converts(self):
        """Conversion does not recurse per level."""
        post = make_post()
        author = make_user()
        top = current = _annotated(make_comment(post, author, created_at=at(0)))
        for i in range(1, 3000):
            child = _annotated(make_comment(post, author, created_at=at(i)))
            current.children.append(child)
            current = child

        nodes = CommentNode.from_forest([top])

        depth = 0
        node = nodes[0]
        while node.children:
            node = node.children[0]
            depth += 1
        assert depth == 2999


class TestDumpThreadJson:
    """Tests for dump_thread_json."""

    def test_matches_pydantic_encoding(self):
        # Arrange
        post = make_post()
        author = make_user("Mauro")
        root = _annotated(make_comment(post, author, "root", created_at=at(0)), like_count=1)
        root.children.append(
            _annotated(make_comment(post, author, "reply", created_at=at(5)))
        )
        other = _annotated(make_comment(post, author, "other", created_at=at(9)))
        nodes = CommentNode.from_forest([other, root])

        # Act
        encoded = dump_thread_json(nodes)

        # Assert
        assert json.loads(encoded) == [node.model_dump(mode="json") for node in nodes]

    def test_empty_thread(self):
        assert dump_thread_json([]) == "[]"

    def test_deep_chain_encodes(self):
        """A chain deeper than the serializer's recursion guard still encodes."""
        post = make_post()
        author = make_user()
        top = current = _annotated(make_comment(post, author, created_at=at(0)))
        for i in range(1, 3000):
            child = _annotated(make_comment(post, author, created_at=at(i)))
            current.children.append(child)
            current = child

        encoded = dump_thread_json(CommentNode.from_forest([top]))

        assert encoded.count('"children":[') == 3000
        assert encoded.endswith('"children":[]}' + "]}" * 2999 + "]")
