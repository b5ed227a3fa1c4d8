# -*- coding: utf-8 -*-
"""
flipsolver.eval パッケージ

伝播結果から、表示用の「ビリリダマらしさ」を見積もる処理をまとめています。
"""
