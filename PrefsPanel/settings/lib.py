"""Preference registry.

Every persisted, user-configurable setting is a member of :class:`PreferenceKey`. Each
key maps to exactly one :class:`DataKind` and to at most one :class:`MetaData` record.
Keys without metadata are persisted but never rendered.

Provides:
    - PreferenceKey, DataKind, MetaData
    - DATA_KINDS, METADATA: the static registry tables
    - renderable_cases: the keys eligible for display, in declaration order
"""
import dataclasses
import enum
from typing import Any, Dict, List, Optional, Tuple

#: Platform version every feature is available on
BASELINE_VERSION: Tuple[int, ...] = (10, 9)

app_name: str = 'PrefsPanel'


class DataKind(enum.StrEnum):
    """The value category of a preference. Determines the rendered control."""
    String = enum.auto()
    Bool = enum.auto()
    Integer = enum.auto()
    Double = enum.auto()
    Collection = enum.auto()
    Mapping = enum.auto()
    Other = enum.auto()


@dataclasses.dataclass(frozen=True)
class MetaData:
    """Rendering metadata of a preference.

    Attributes:
        short_title: The title shown beside the control.
        prompt: A longer title, used by hosts that show prompts.
        inline_prompt: Prepended to the description.
        popup_prompt: Shown by hosts that ask for the value in a popup.
        description: The description shown under the control.
        minimum_version: The platform version the feature requires.
        options: (tag, label) pairs. A None entry is rendered as a separator.
        options_representable: (value, label) pairs for values that are not integer tags.
        tooltip: Tooltip of the control.
    """
    short_title: Optional[str] = None
    prompt: Optional[str] = None
    inline_prompt: Optional[str] = None
    popup_prompt: Optional[str] = None
    description: Optional[str] = None
    minimum_version: Tuple[int, ...] = BASELINE_VERSION
    options: Optional[Tuple[Optional[Tuple[int, str]], ...]] = None
    options_representable: Optional[Tuple[Optional[Tuple[Any, str]], ...]] = None
    tooltip: Optional[str] = None


class PreferenceKey(enum.StrEnum):
    """The registry of persisted preferences. The value is the key in the store."""
    TestStringSansOptions = 'kStringsSansOptions'
    TestStringWithComboBox = 'kStringsWithComboBox'
    TestStringWithFixedOptions = 'kStringsWithFixedOptions'
    TestBool = 'kBool'
    TestIntWithOptions = 'kIntWithOptions'
    TestIntSansOptions = 'kIntSansOptions'
    TestDoubleWithOptions = 'kDoubleWithOptions'
    TestArray = 'kArray'
    TestDictionary = 'kDictionary'

    @property
    def id(self) -> str:
        return self.value

    @property
    def data_kind(self) -> DataKind:
        return DATA_KINDS[self]

    @property
    def meta_data(self) -> Optional[MetaData]:
        return METADATA.get(self)

    def to_renderable(self, store=None):
        """Return a new :class:`PrefsPanel.settings.renderable.RenderableAdapter` for this key."""
        from .renderable import RenderableAdapter
        return RenderableAdapter(self, store=store)

    def render(self, fix_width=None, extra_ops=None, store=None):
        """Render this key as a bound row.

        Args:
            fix_width (float, optional): Fixed width of the row.
            extra_ops (callable, optional): Called with the adapter before rendering, to customize it.
            store (PreferenceStore, optional): Defaults to the current store.

        Returns:
            QtWidgets.QWidget: The row, or None when there is nothing to show.
        """
        renderable = self.to_renderable(store=store)
        if extra_ops is not None:
            extra_ops(renderable)
        return renderable.render(fix_width=fix_width)


DATA_KINDS: Dict[PreferenceKey, DataKind] = {
    PreferenceKey.TestStringSansOptions: DataKind.String,
    PreferenceKey.TestStringWithComboBox: DataKind.String,
    PreferenceKey.TestStringWithFixedOptions: DataKind.String,
    PreferenceKey.TestBool: DataKind.Bool,
    PreferenceKey.TestIntWithOptions: DataKind.Integer,
    PreferenceKey.TestIntSansOptions: DataKind.Integer,
    PreferenceKey.TestDoubleWithOptions: DataKind.Double,
    PreferenceKey.TestArray: DataKind.Collection,
    PreferenceKey.TestDictionary: DataKind.Mapping,
}

METADATA: Dict[PreferenceKey, Optional[MetaData]] = {
    PreferenceKey.TestStringSansOptions: MetaData(
        short_title='測試以 String 為資料值的填寫選項',
        description='該選項沒有備選內容，請手動填寫。',
    ),
    PreferenceKey.TestStringWithComboBox: MetaData(
        short_title='測試以 String 為資料值的填寫選項',
        description='該選項有備選內容。選擇的內容與寫入設定檔的是同樣的 String。',
        # The tags are not used by combo boxes
        options=(
            (0, '參考填寫一'),
            (1, '參考填寫二'),
            (3, '參考填寫三'),
        ),
    ),
    PreferenceKey.TestStringWithFixedOptions: MetaData(
        short_title='測試以 String 為資料值的備選選項',
        description='該選項有備選內容。選擇的內容是國語，寫入設定檔的是日語。',
        options_representable=(
            ('もう待ちきれないよ！早く出してくれ！', '已經等不及了！趕緊端上來吧！'),
            ('非常に新鮮で、非常に美味しい', '非常的新鮮、非常的美味。'),
        ),
    ),
    PreferenceKey.TestBool: MetaData(
        short_title='測試備選選項',
        description='該選項有備選內容。選擇的內容是國語，寫入設定檔的是 Bool。',
        options=(
            (0, '停用'),
            (1, '啟用'),
        ),
    ),
    PreferenceKey.TestIntWithOptions: MetaData(
        short_title='測試數字被選項',
        description='該選項有備選內容。選擇的內容是日語，寫入設定檔的是數字。',
        minimum_version=(10, 11),
        options=(
            (114, 'いいよ'),
            (514, 'こいよ'),
            (1919, 'いくいく'),
            (810, 'はいれ'),
        ),
    ),
    PreferenceKey.TestIntSansOptions: None,
    PreferenceKey.TestDoubleWithOptions: MetaData(
        short_title='測試以 Double 為資料值的備選選項',
        description='該選項與整數選項共用同一種備選內容格式，寫入設定檔的是浮點數。',
        options=(
            (1, '一倍'),
            (2, '二倍'),
            None,
            (4, '四倍'),
        ),
    ),
    PreferenceKey.TestArray: MetaData(
        short_title='測試以 Array 為資料值的選項',
        description='陣列沒有內建的控件，需要自訂控件。',
        tooltip='清空此陣列',
    ),
    PreferenceKey.TestDictionary: None,
}


def renderable_cases() -> List[PreferenceKey]:
    """Return the keys that have metadata, in declaration order."""
    return [f for f in PreferenceKey if f.meta_data is not None]


def from_id(key: str) -> PreferenceKey:
    """Return the registry member for a key string.

    Raises:
        status.UnknownPreferenceKeyException: If the key is not in the registry.
    """
    try:
        return PreferenceKey(key)
    except ValueError:
        from ..status import status
        raise status.UnknownPreferenceKeyException(f'"{key}"')
