# -*- coding: utf-8 -*-
"""
flipsolver.csp パッケージ

行・列のヒント数字から各マスの値を絞り込む制約伝播をまとめています。

主に以下の役割を持つモジュールから構成されています。
- sequences.py   : ヒント数字を満たす並び（候補並び）の列挙
- domains.py     : 盤面状態の初期化と、マスの値の確定（fix / reveal）
- propagation.py : 行候補・列候補・マスの可能値集合の間の制約伝播
"""
