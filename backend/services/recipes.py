BASIC_SEASONINGS = """
調味料・香辛料は以下のものを適宜使用可能とします：
- 基本調味料：塩、砂糖、醤油、味噌、酢、みりん、料理酒
- 油類：サラダ油、ごま油、オリーブオイル
- 薬味・香辛料：胡椒、からし、わさび、生姜、にんにく
- 調味料：マヨネーズ、ケチャップ、ソース、めんつゆ、だし、ポン酢、ドレッシング
- 中華調味料：豆板醤、甜麺醤
"""

INSTRUCTIONS = """注意事項：
- できる限り入力された食材のみを使用してレシピを考えてください
- 全ての食材を使い切る必要はありませんが、できるだけ多くの食材を活用してください
- 余った食材は他の料理や保存可能です"""

OUTPUT_FORMAT = """以下の形式で出力してください：
1. 料理名
2. 調理時間
3. 実際に使用する食材と量
4. 手順
5. コツやポイント"""

INGREDIENT_LABEL = "食材："

def build_recipe_prompt(ingredients_list: str) -> str:
    """
    Compose the initial recipe request:
    header + ingredient list, instructions, seasoning disclosure, output outline.
    """
    return (
        "以下の食材（グラム単位）を使用した料理のレシピを提案してください：\n"
        f"{ingredients_list}\n\n"
        f"{INSTRUCTIONS}\n\n"
        f"{BASIC_SEASONINGS}\n\n"
        f"{OUTPUT_FORMAT}"
    )

def ingredient_list_message(ingredients_list: str) -> str:
    """Text of the synthetic first user message."""
    return f"{INGREDIENT_LABEL}{ingredients_list}"
