# -*- coding: utf-8 -*-
"""
flipsolver.grid パッケージ

画面・API から来る入力を内部表現に変換するサブパッケージです。
- parser.py : ヒント数字の表とめくったマスの盤面の正規化
"""
